from cinedb.api_client.executor import RequestExecutor
from cinedb.schemas.movie import Movie
from cinedb.schemas.person import Person
from cinedb.schemas.show import Show


async def movie(executor: RequestExecutor, query: str) -> list[Movie] | None:
    return await executor.get("search/movie", {"query": query})


async def show(executor: RequestExecutor, query: str) -> list[Show] | None:
    return await executor.get("search/tv", {"query": query})


async def person(executor: RequestExecutor, query: str) -> list[Person] | None:
    return await executor.get("search/person", {"query": query})
