import os
import sys

import pytest
from loguru import logger

from cinedb.logging_.logger import dynamic_formatter, setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_dynamic_formatter_renders_bound_extras() -> None:
    record = {"extra": {"status": 404, "url": "movie/1"}, "exception": None}

    fmt = dynamic_formatter(record)

    assert "(status={extra[status]}, url={extra[url]})" in fmt
    assert fmt.endswith("\n")


def test_dynamic_formatter_without_extras() -> None:
    fmt = dynamic_formatter({"extra": {}, "exception": None})

    assert "extra" not in fmt
    assert "{exception}" not in fmt


def test_setup_logger_creates_daily_log_folder(tmp_path, restore_logger) -> None:
    configured = setup_logger("tests", log_dir=str(tmp_path))
    configured.bind(status=500).error("boom")
    configured.complete()
    logger.remove()

    [day_dir] = os.listdir(tmp_path)
    log_path = tmp_path / day_dir / "tests"
    assert (log_path / "error.log").exists()
    assert "status=500" in (log_path / "error.log").read_text()
