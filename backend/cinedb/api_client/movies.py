from cinedb.api_client.config import APPEND_TO_RESPONSE
from cinedb.api_client.executor import RequestExecutor
from cinedb.schemas.movie import Movie


async def now_playing(executor: RequestExecutor) -> list[Movie] | None:
    return await executor.get("movie/now_playing")


async def upcoming(executor: RequestExecutor) -> list[Movie] | None:
    return await executor.get("movie/upcoming")


async def popular(executor: RequestExecutor) -> list[Movie] | None:
    return await executor.get("movie/popular")


async def find_by_id(executor: RequestExecutor, id: int) -> Movie | None:
    return await executor.get(
        f"movie/{id}", {"append_to_response": APPEND_TO_RESPONSE}
    )


async def find_similar_by_id(executor: RequestExecutor, id: int) -> list[Movie] | None:
    return await executor.get(f"movie/{id}/similar")
