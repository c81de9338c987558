from fastapi import APIRouter

from cinedb.api.deps import ExecutorDep, ensure_found
from cinedb.api_client import movies as movies_api
from cinedb.schemas.movie import Movie

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/now-playing", response_model=None)
async def read_now_playing(executor: ExecutorDep) -> list[Movie]:
    return ensure_found(await movies_api.now_playing(executor), "Now playing movies")


@router.get("/upcoming", response_model=None)
async def read_upcoming(executor: ExecutorDep) -> list[Movie]:
    return ensure_found(await movies_api.upcoming(executor), "Upcoming movies")


@router.get("/popular", response_model=None)
async def read_popular(executor: ExecutorDep) -> list[Movie]:
    return ensure_found(await movies_api.popular(executor), "Popular movies")


@router.get("/{id}/similar", response_model=None)
async def read_similar_movies(executor: ExecutorDep, id: int) -> list[Movie]:
    return ensure_found(
        await movies_api.find_similar_by_id(executor, id),
        f"Movies similar to movie {id}",
    )


# KEEP AT THE BOTTOM
@router.get("/{id}", response_model=None)
async def read_movie(executor: ExecutorDep, id: int) -> Movie:
    return ensure_found(await movies_api.find_by_id(executor, id), f"Movie {id}")
