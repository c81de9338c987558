from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from cinedb.api_client.config import default_query_params
from cinedb.api_client.executor import RequestExecutor
from cinedb.core.config import settings


def create_session(
    *,
    read_access_token: str | None = None,
    timeout_seconds: float | None = None,
) -> aiohttp.ClientSession:
    """Build the aiohttp session that carries authentication and timeouts."""
    headers = {"Accept": "application/json"}
    if read_access_token:
        headers["Authorization"] = f"Bearer {read_access_token}"
    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds if timeout_seconds is not None else settings.TMDB_TIMEOUT_SECONDS
    )
    return aiohttp.ClientSession(headers=headers, timeout=timeout)


@asynccontextmanager
async def tmdb_executor() -> AsyncIterator[RequestExecutor]:
    """Open a configured session, yield an executor bound to it, close on exit."""
    session = create_session(read_access_token=settings.TMDB_READ_ACCESS_TOKEN)
    try:
        yield RequestExecutor(
            session,
            base_url=settings.TMDB_BASE_URL,
            default_params=default_query_params(),
        )
    finally:
        await session.close()
