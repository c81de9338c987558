from cinedb.api_client.config import APPEND_TO_RESPONSE
from cinedb.api_client.executor import RequestExecutor
from cinedb.schemas.show import Episode, Season, Show


async def top_rated(executor: RequestExecutor) -> list[Show] | None:
    return await executor.get("tv/top_rated")


async def popular(executor: RequestExecutor) -> list[Show] | None:
    return await executor.get("tv/popular")


async def airing_today(executor: RequestExecutor) -> list[Show] | None:
    return await executor.get("tv/airing_today")


async def find_by_id(executor: RequestExecutor, id: int) -> Show | None:
    return await executor.get(f"tv/{id}", {"append_to_response": APPEND_TO_RESPONSE})


async def find_similar_by_id(executor: RequestExecutor, id: int) -> list[Show] | None:
    return await executor.get(f"tv/{id}/similar")


async def get_season_detail(
    executor: RequestExecutor, show_id: int, season_number: int
) -> Season | None:
    return await executor.get(f"tv/{show_id}/season/{season_number}")


async def get_episode_detail(
    executor: RequestExecutor,
    show_id: int,
    season_number: int,
    episode_number: int,
) -> Episode | None:
    return await executor.get(
        f"tv/{show_id}/season/{season_number}/episode/{episode_number}"
    )
