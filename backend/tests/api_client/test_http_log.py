from datetime import datetime, timezone

import pytest
from loguru import logger

from cinedb.api_client.http_log import HttpLogRecord, http_log


@pytest.fixture
def captured() -> list:
    messages: list = []
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    yield messages
    logger.remove(handler_id)


def _record(status: int, status_text: str) -> HttpLogRecord:
    return HttpLogRecord(
        service="HTTP Service",
        method="GET",
        url="https://api.themoviedb.org/3/movie/1",
        start_time=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        status=status,
        status_text=status_text,
        elapsed_ms=12.5,
    )


def test_http_log_binds_record_fields(captured: list) -> None:
    http_log(_record(404, "Not Found"))

    assert len(captured) == 1
    record = captured[0].record
    assert record["level"].name == "WARNING"
    assert record["extra"] == {
        "service": "HTTP Service",
        "method": "GET",
        "url": "https://api.themoviedb.org/3/movie/1",
        "start_time": "2024-05-01T12:00:00+00:00",
        "status": 404,
        "status_text": "Not Found",
        "elapsed_ms": 12.5,
    }
    assert "404 Not Found" in record["message"]


def test_http_log_uses_error_level_for_server_errors(captured: list) -> None:
    http_log(_record(502, "Bad Gateway"))

    assert captured[0].record["level"].name == "ERROR"
