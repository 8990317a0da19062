from collections.abc import Generator
from typing import Any

import pytest
from loguru import logger


@pytest.fixture
def captured_logs() -> Generator[list[tuple[str, str]], None, None]:
    """Capture (level, message) pairs for everything logged through loguru during a test."""
    records: list[tuple[str, str]] = []

    def sink(message: Any) -> None:
        record = message.record
        records.append((record["level"].name, record["message"]))

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    try:
        yield records
    finally:
        logger.remove(handler_id)
