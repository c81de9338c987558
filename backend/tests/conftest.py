from collections.abc import Callable, Generator
from typing import Any

import factory  # type: ignore
import pytest
from fastapi.testclient import TestClient

from cinedb.api.deps import get_executor
from cinedb.api_client.executor import RequestExecutor
from cinedb.api_client.http_log import HttpLogRecord
from cinedb.main import app

BASE_URL = "https://tmdb.test/3"


class MovieFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    title = factory.Faker("sentence", nb_words=3)
    overview = factory.Faker("paragraph")
    release_date = factory.Faker("date")
    vote_average = factory.Faker("pyfloat", min_value=0, max_value=10, right_digits=1)


class ShowFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    name = factory.Faker("sentence", nb_words=2)
    first_air_date = factory.Faker("date")
    number_of_seasons = factory.Faker("pyint", min_value=1, max_value=12)


class PersonFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: n + 1)
    name = factory.Faker("name")
    known_for_department = "Acting"


class FakeResponse:
    def __init__(
        self,
        *,
        status: int = 200,
        reason: str | None = "OK",
        payload: Any = None,
        method: str = "GET",
    ):
        self.status = status
        self.reason = reason
        self.method = method
        self._payload = payload

    async def json(self, content_type: str | None = "application/json") -> Any:
        return self._payload


class FakeRequestContext:
    def __init__(self, response: FakeResponse | None, error: BaseException | None):
        self._response = response
        self._error = error

    async def __aenter__(self) -> FakeResponse:
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


class FakeSession:
    """Stands in for ``aiohttp.ClientSession`` and records every GET."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        error: BaseException | None = None,
    ):
        self.response = response or FakeResponse(payload={})
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, params: dict[str, Any] | None = None) -> FakeRequestContext:
        self.calls.append((url, dict(params or {})))
        return FakeRequestContext(self.response, self.error)


@pytest.fixture
def log_records() -> list[HttpLogRecord]:
    return []


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def executor(
    fake_session: FakeSession, log_records: list[HttpLogRecord]
) -> RequestExecutor:
    return RequestExecutor(
        fake_session,  # type: ignore[arg-type]
        base_url=BASE_URL,
        log_sink=log_records.append,
    )


@pytest.fixture
def client(executor: RequestExecutor) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_executor] = lambda: executor
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def respond(fake_session: FakeSession) -> Callable[..., FakeResponse]:
    """Set the response the fake session hands back for every GET."""

    def _respond(**kwargs: Any) -> FakeResponse:
        fake_session.response = FakeResponse(**kwargs)
        return fake_session.response

    return _respond


@pytest.fixture
def movie_factory() -> type[MovieFactory]:
    return MovieFactory


@pytest.fixture
def show_factory() -> type[ShowFactory]:
    return ShowFactory


@pytest.fixture
def person_factory() -> type[PersonFactory]:
    return PersonFactory
