from fastapi import APIRouter

from cinedb.api.deps import ExecutorDep, ensure_found
from cinedb.api_client import shows as shows_api
from cinedb.schemas.show import Episode, Season, Show

router = APIRouter(prefix="/shows", tags=["shows"])


@router.get("/top-rated", response_model=None)
async def read_top_rated(executor: ExecutorDep) -> list[Show]:
    return ensure_found(await shows_api.top_rated(executor), "Top rated shows")


@router.get("/popular", response_model=None)
async def read_popular(executor: ExecutorDep) -> list[Show]:
    return ensure_found(await shows_api.popular(executor), "Popular shows")


@router.get("/airing-today", response_model=None)
async def read_airing_today(executor: ExecutorDep) -> list[Show]:
    return ensure_found(await shows_api.airing_today(executor), "Shows airing today")


@router.get("/{show_id}/seasons/{season_number}", response_model=None)
async def read_season(
    *, executor: ExecutorDep, show_id: int, season_number: int
) -> Season:
    return ensure_found(
        await shows_api.get_season_detail(executor, show_id, season_number),
        f"Season {season_number} of show {show_id}",
    )


@router.get(
    "/{show_id}/seasons/{season_number}/episodes/{episode_number}",
    response_model=None,
)
async def read_episode(
    *,
    executor: ExecutorDep,
    show_id: int,
    season_number: int,
    episode_number: int,
) -> Episode:
    return ensure_found(
        await shows_api.get_episode_detail(
            executor, show_id, season_number, episode_number
        ),
        f"Episode {episode_number} of season {season_number} of show {show_id}",
    )


@router.get("/{id}/similar", response_model=None)
async def read_similar_shows(executor: ExecutorDep, id: int) -> list[Show]:
    return ensure_found(
        await shows_api.find_similar_by_id(executor, id),
        f"Shows similar to show {id}",
    )


# KEEP AT THE BOTTOM
@router.get("/{id}", response_model=None)
async def read_show(executor: ExecutorDep, id: int) -> Show:
    return ensure_found(await shows_api.find_by_id(executor, id), f"Show {id}")
