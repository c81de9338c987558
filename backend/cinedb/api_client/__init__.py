from . import movies, people, search, shows
from .executor import RequestExecutor
from .http_log import HttpLogRecord, http_log
from .session import create_session, tmdb_executor

__all__ = [
    "RequestExecutor",
    "HttpLogRecord",
    "http_log",
    "create_session",
    "tmdb_executor",
    "movies",
    "shows",
    "people",
    "search",
]
