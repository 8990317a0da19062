class BaseRsyncStatsError(Exception):
    """Base exception for all rsync_stats errors.

    Subclasses can provide a user_help_text attribute with a hint on how to fix
    the rsync invocation that produced the unparseable output.
    """

    user_help_text: str | None = None

    def format_message(self) -> str:
        if self.user_help_text:
            return str(self) + "  [" + self.user_help_text + "]"
        return str(self)


class RsyncOutputFormatError(BaseRsyncStatsError, ValueError):
    """Raised when a line starts like an rsync summary line but does not have its shape."""

    user_help_text = "Try starting rsync with LC_ALL=C.UTF-8 and without --human-readable."

    def __init__(self, line_kind: str, line: str) -> None:
        self.line_kind = line_kind
        self.line = line
        super().__init__(f"could not parse rsync '{line_kind}' line: {line!r}")


class RsyncNumberError(BaseRsyncStatsError, ValueError):
    """Raised when a number captured from rsync output cannot be converted."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        super().__init__(f"could not convert rsync number {value!r}: {reason}")


class NoBytesTransferredError(BaseRsyncStatsError, ZeroDivisionError):
    """Raised when the speedup is requested for stats where no bytes were sent or received."""
