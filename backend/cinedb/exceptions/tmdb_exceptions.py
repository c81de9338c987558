from fastapi import status

from cinedb.core.enums import ErrorKind

from .base import AppError

NO_CONNECTION_MESSAGE = "Unable to reach TMDB. Check your internet connection."
INVALID_API_KEY_MESSAGE = "Invalid TMDB API key."
SERVER_ERROR_MESSAGE_TEMPLATE = "TMDB server error: {status_text}"


class TmdbError(AppError):
    """Base for failures classified by the request executor.

    Carries the classification kind plus whatever request context was
    available when the failure happened. ``status`` and friends are ``None``
    when no response was received.
    """

    kind: ErrorKind

    def __init__(
        self,
        detail: str,
        *,
        status: int | None = None,
        status_text: str | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        self.status = status
        self.status_text = status_text
        self.method = method
        self.url = url
        super().__init__(detail)


class NoConnectionError(TmdbError):
    kind = ErrorKind.NO_CONNECTION
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, *, method: str | None = None, url: str | None = None):
        super().__init__(NO_CONNECTION_MESSAGE, method=method, url=url)


class InvalidApiKeyError(TmdbError):
    kind = ErrorKind.INVALID_API_KEY
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(
        self,
        *,
        status_text: str | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(
            INVALID_API_KEY_MESSAGE,
            status=status.HTTP_401_UNAUTHORIZED,
            status_text=status_text,
            method=method,
            url=url,
        )


class ServerError(TmdbError):
    kind = ErrorKind.SERVER_ERROR
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(
        self,
        *,
        status: int,
        status_text: str,
        method: str | None = None,
        url: str | None = None,
    ):
        detail = SERVER_ERROR_MESSAGE_TEMPLATE.format(status_text=status_text)
        super().__init__(
            detail,
            status=status,
            status_text=status_text,
            method=method,
            url=url,
        )
