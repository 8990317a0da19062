"""Extract transfer totals from rsync standard output.

rsync requirements:

- Start rsync with --verbose (-v) or --stats so that transfer totals are printed.
- Do not pass --human-readable (-h), otherwise the numbers cannot be parsed.
- Run rsync in the C.UTF-8 locale (LC_ALL=C.UTF-8) so that big numbers use ","
  for grouping and "." as the fractional point.

The summary lines look like:

    sent 1,590 bytes  received 18 bytes  3,216.00 bytes/sec
    total size is 1,188,046  speedup is 738.83
"""

import io
import re
import time
from collections.abc import Iterable
from collections.abc import Iterator
from typing import Final

from loguru import logger

from imbue.rsync_stats.data_types import RsyncStats
from imbue.rsync_stats.errors import RsyncOutputFormatError
from imbue.rsync_stats.numbers import parse_big_int
from imbue.rsync_stats.numbers import parse_rate

SENT_LINE_PREFIX: Final[str] = "sent "
TOTAL_SIZE_LINE_PREFIX: Final[str] = "total size is "

_STATS_TRANSFER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"sent ([0-9,]+) bytes  received ([0-9,]+) bytes  ([0-9,.]+) bytes/sec"
)
_STATS_SIZE_PATTERN: Final[re.Pattern[str]] = re.compile(r"total size is ([0-9,]+)  speedup is ([0-9,.]+)")


def iter_output_lines(stream: Iterable[str] | Iterable[bytes]) -> Iterator[str]:
    """Yield lines from rsync output one at a time, without their line terminators.

    Works on text streams, binary streams, or any iterable of lines. The stream is
    only read forward, so output piped from a running rsync is handled as it arrives.
    """
    for raw_line in stream:
        if isinstance(raw_line, bytes):
            # file names are printed verbatim and need not be valid UTF-8
            line = raw_line.decode("utf-8", errors="replace")
        else:
            line = raw_line
        yield line.removesuffix("\n").removesuffix("\r")


def apply_output_line(line: str, stats: RsyncStats) -> RsyncStats:
    """Return stats updated with the values from a single line of rsync output.

    Lines that are not summary lines return stats unchanged. A line that starts like a
    summary line but does not match it completely raises RsyncOutputFormatError.
    """
    if line.startswith(SENT_LINE_PREFIX):
        match = _STATS_TRANSFER_PATTERN.fullmatch(line)
        if match is None:
            logger.debug("Unparseable rsync 'sent' line: {!r}", line)
            raise RsyncOutputFormatError("sent", line)
        logger.trace("Found rsync transfer totals: {}", line)
        return stats.model_copy(
            update={
                "found": True,
                "total_written": parse_big_int(match.group(1)),
                "total_read": parse_big_int(match.group(2)),
                "bytes_per_second": parse_rate(match.group(3)),
            }
        )

    if line.startswith(TOTAL_SIZE_LINE_PREFIX):
        match = _STATS_SIZE_PATTERN.fullmatch(line)
        if match is None:
            logger.debug("Unparseable rsync 'total size is' line: {!r}", line)
            raise RsyncOutputFormatError("total size is", line)
        logger.trace("Found rsync total size: {}", line)
        # rsync's own speedup (group 2) is rounded; RsyncStats.speedup() recomputes it
        return stats.model_copy(update={"found": True, "total_size": parse_big_int(match.group(1))})

    return stats


def parse_rsync_stats(stream: Iterable[str] | Iterable[bytes]) -> RsyncStats:
    """Scan rsync output line by line and return the transfer totals found in it.

    If no summary line is present, the result has found=False and all values zero.
    Errors raised while reading the stream propagate unchanged; no partial result is
    returned.
    """
    stats = RsyncStats()
    line_count = 0
    with logger.contextualize(parser="rsync_stats"):
        logger.debug("Parsing rsync output")
        start_time = time.monotonic()
        for line in iter_output_lines(stream):
            line_count += 1
            stats = apply_output_line(line, stats)
        elapsed = time.monotonic() - start_time
        logger.trace(
            "Parsing rsync output [done in {:.5f} sec, {} lines, found={}]",
            elapsed,
            line_count,
            stats.found,
        )
    return stats


def parse_rsync_stats_text(output: str) -> RsyncStats:
    """Parse rsync stdout that was already captured into a string."""
    return parse_rsync_stats(io.StringIO(output))
