import pytest
from inline_snapshot import snapshot
from pydantic import ValidationError

from imbue.rsync_stats.data_types import RsyncStats
from imbue.rsync_stats.errors import NoBytesTransferredError


def test_default_stats_are_empty() -> None:
    assert RsyncStats().model_dump() == snapshot(
        {
            "found": False,
            "total_written": 0,
            "total_read": 0,
            "bytes_per_second": 0.0,
            "total_size": 0,
        }
    )


def test_stats_are_frozen() -> None:
    stats = RsyncStats(found=True, total_written=1590)
    with pytest.raises(ValidationError):
        stats.total_written = 1  # type: ignore[misc]


def test_stats_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        RsyncStats(speedup_is=738.83)  # type: ignore[call-arg]


def test_speedup_uses_integer_division() -> None:
    """rsync reports 738.83 for these totals, but the byte counts divide as integers."""
    stats = RsyncStats(found=True, total_written=1590, total_read=18, bytes_per_second=3216.0, total_size=1188046)
    assert stats.speedup() == float(1188046 // (1590 + 18))
    assert stats.speedup() == 738.0


def test_speedup_when_exact() -> None:
    stats = RsyncStats(found=True, total_written=60, total_read=40, total_size=1000)
    assert stats.speedup() == 10.0


def test_speedup_below_one_truncates_to_zero() -> None:
    stats = RsyncStats(found=True, total_written=900, total_read=200, total_size=1000)
    assert stats.speedup() == 0.0


def test_speedup_without_transferred_bytes_raises() -> None:
    with pytest.raises(NoBytesTransferredError):
        RsyncStats().speedup()
    with pytest.raises(ZeroDivisionError):
        RsyncStats(found=True, total_size=5).speedup()
