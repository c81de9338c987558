from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cinedb.api.main import api_router
from cinedb.api_client.session import tmdb_executor
from cinedb.core.config import settings
from cinedb.exceptions.handlers import register_exception_handlers
from cinedb.logging_.logger import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logger("api")
    async with tmdb_executor() as executor:
        app.state.executor = executor
        yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)
register_exception_handlers(app)
app.include_router(api_router, prefix=settings.API_V1_STR)
