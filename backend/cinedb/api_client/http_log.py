from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from loguru import logger


@dataclass(frozen=True)
class HttpLogRecord:
    service: str
    method: str
    url: str
    start_time: datetime
    status: int
    status_text: str
    elapsed_ms: float


LogSink = Callable[[HttpLogRecord], None]


def http_log(record: HttpLogRecord) -> None:
    """Write one failed upstream call to the log with its fields bound as extras."""
    level = "ERROR" if record.status >= 500 else "WARNING"
    logger.bind(
        service=record.service,
        method=record.method,
        url=record.url,
        start_time=record.start_time.isoformat(),
        status=record.status,
        status_text=record.status_text,
        elapsed_ms=record.elapsed_ms,
    ).log(
        level,
        f"{record.method} {record.url} -> {record.status} {record.status_text}",
    )
