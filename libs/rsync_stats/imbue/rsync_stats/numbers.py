from typing import Final

import deal

from imbue.rsync_stats.errors import RsyncNumberError

# rsync's do_big_num() groups thousands with "," when run under C.UTF-8
GROUPING_SEPARATOR: Final[str] = ","

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


@deal.has()
def strip_grouping_separators(text: str) -> str:
    """Remove every grouping separator, e.g. '1,188,046' -> '1188046'."""
    return text.replace(GROUPING_SEPARATOR, "")


@deal.has()
def parse_big_int(text: str) -> int:
    """Parse an rsync byte count into a signed 64-bit integer.

    Only base-10 digits are accepted once the grouping separators are removed.
    """
    digits = strip_grouping_separators(text)
    try:
        value = int(digits, 10)
    except ValueError as e:
        raise RsyncNumberError(text, "not a base-10 integer") from e
    if not INT64_MIN <= value <= INT64_MAX:
        raise RsyncNumberError(text, "out of range for a 64-bit integer")
    return value


@deal.has()
def parse_rate(text: str) -> float:
    """Parse an rsync transfer rate such as '3,216.00' into a float."""
    digits = strip_grouping_separators(text)
    try:
        return float(digits)
    except ValueError as e:
        raise RsyncNumberError(text, "not a decimal number") from e
