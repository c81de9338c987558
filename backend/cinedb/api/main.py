from fastapi import APIRouter

from cinedb.api.routes import (
    movies,
    people,
    search,
    shows,
    utils,
)

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(movies.router)
api_router.include_router(shows.router)
api_router.include_router(people.router)
api_router.include_router(search.router)
