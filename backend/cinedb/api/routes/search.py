from fastapi import APIRouter, Query

from cinedb.api.deps import ExecutorDep, ensure_found
from cinedb.api_client import search as search_api
from cinedb.schemas.movie import Movie
from cinedb.schemas.person import Person
from cinedb.schemas.show import Show

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/movies", response_model=None)
async def search_movies(
    executor: ExecutorDep, query: str = Query(..., min_length=1)
) -> list[Movie]:
    return ensure_found(
        await search_api.movie(executor, query), f"Movies matching '{query}'"
    )


@router.get("/shows", response_model=None)
async def search_shows(
    executor: ExecutorDep, query: str = Query(..., min_length=1)
) -> list[Show]:
    return ensure_found(
        await search_api.show(executor, query), f"Shows matching '{query}'"
    )


@router.get("/people", response_model=None)
async def search_people(
    executor: ExecutorDep, query: str = Query(..., min_length=1)
) -> list[Person]:
    return ensure_found(
        await search_api.person(executor, query), f"People matching '{query}'"
    )
