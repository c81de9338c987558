"""Shared TMDB request constants."""

from collections.abc import Mapping

from cinedb.core.config import settings

TMDB_BASE_URL: str = settings.TMDB_BASE_URL
HTTP_SERVICE_LABEL: str = "HTTP Service"
APPEND_TO_RESPONSE: str = "videos,credits"

QueryParams = Mapping[str, str | int]


def default_query_params() -> dict[str, str | int]:
    """Query parameters sent with every request, built from settings."""
    params: dict[str, str | int] = {}
    if settings.TMDB_KEY:
        params["api_key"] = settings.TMDB_KEY
    if settings.TMDB_LANGUAGE:
        params["language"] = settings.TMDB_LANGUAGE
    return params
