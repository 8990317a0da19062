import sys
from enum import StrEnum
from enum import auto
from typing import Any
from typing import Final

from loguru import logger

LOG_FORMAT: Final[str] = (
    "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class LogLevel(StrEnum):
    """Log verbosity level, named after the matching loguru level."""

    @staticmethod
    def _generate_next_value_(
        name: str,
        start: int,
        count: int,
        last_values: list[str],
    ) -> str:
        return name.upper()

    TRACE = auto()
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()


def setup_logging(level: LogLevel | str = LogLevel.INFO, sink: Any = sys.stderr) -> int:
    """Replace loguru's default handler with one at the given level.

    The library itself never calls this; applications that want to see what the
    parser is doing opt in. Returns the loguru handler id so callers can remove it.
    """
    log_level = LogLevel(str(level).upper())
    logger.remove()
    return logger.add(sink, level=log_level.value, format=LOG_FORMAT)
