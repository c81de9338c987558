from typing import Annotated, TypeVar

from fastapi import Depends, Request

from cinedb.api_client.executor import RequestExecutor
from cinedb.exceptions.resource_exceptions import ResourceNotFoundError

T = TypeVar("T")


def get_executor(request: Request) -> RequestExecutor:
    return request.app.state.executor


ExecutorDep = Annotated[RequestExecutor, Depends(get_executor)]


def ensure_found(value: T | None, description: str) -> T:
    """Turn the executor's absent result into a 404 for the HTTP layer."""
    if value is None:
        raise ResourceNotFoundError(description)
    return value
