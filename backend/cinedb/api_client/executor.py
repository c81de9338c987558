import asyncio
import time
from datetime import datetime, timezone
from typing import Any

import aiohttp
from loguru import logger

from cinedb.api_client.config import HTTP_SERVICE_LABEL, TMDB_BASE_URL, QueryParams
from cinedb.api_client.http_log import HttpLogRecord, LogSink, http_log
from cinedb.exceptions.tmdb_exceptions import (
    NO_CONNECTION_MESSAGE,
    InvalidApiKeyError,
    NoConnectionError,
    ServerError,
)


def unwrap_envelope(payload: Any) -> Any:
    """Return ``payload["results"]`` for paginated envelopes, the payload otherwise."""
    if isinstance(payload, dict) and "results" in payload:
        return payload["results"]
    return payload


class RequestExecutor:
    """Runs single GET requests against TMDB and classifies their failures.

    Outcomes of :meth:`get`:

    * 2xx: the decoded body, unwrapped from its ``results`` envelope if present.
    * no response at all: :class:`NoConnectionError`.
    * 401: :class:`InvalidApiKeyError`.
    * 5xx: :class:`ServerError`.
    * any other error status: ``None``.

    Every error status produces exactly one :class:`HttpLogRecord` on the sink.
    The executor holds no per-call state, so one instance can serve any number
    of concurrent calls.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        base_url: str = TMDB_BASE_URL,
        default_params: QueryParams | None = None,
        log_sink: LogSink = http_log,
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.default_params = dict(default_params or {})
        self.log_sink = log_sink

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str, params: QueryParams | None = None) -> Any | None:
        url = self.build_url(path)
        query = {**self.default_params, **(params or {})}

        start_time = datetime.now(timezone.utc)
        started = time.perf_counter()
        try:
            async with self.session.get(url, params=query) as response:
                if not 200 <= response.status < 300:
                    return self._handle_error_response(
                        response=response,
                        url=url,
                        start_time=start_time,
                        elapsed_ms=_elapsed_ms(started),
                    )
                payload = await response.json(content_type=None)
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
            logger.error(f"{NO_CONNECTION_MESSAGE} GET {url} failed: {e!r}")
            raise NoConnectionError(method="GET", url=url) from e

        logger.trace(f"GET {url} succeeded in {_elapsed_ms(started)} ms")
        return unwrap_envelope(payload)

    def _handle_error_response(
        self,
        *,
        response: aiohttp.ClientResponse,
        url: str,
        start_time: datetime,
        elapsed_ms: float,
    ) -> None:
        status = response.status
        status_text = response.reason or ""
        method = response.method

        self.log_sink(
            HttpLogRecord(
                service=HTTP_SERVICE_LABEL,
                method=method,
                url=url,
                start_time=start_time,
                status=status,
                status_text=status_text,
                elapsed_ms=elapsed_ms,
            )
        )

        if status == 401:
            raise InvalidApiKeyError(status_text=status_text, method=method, url=url)
        if status >= 500:
            raise ServerError(
                status=status, status_text=status_text, method=method, url=url
            )
        return None


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
