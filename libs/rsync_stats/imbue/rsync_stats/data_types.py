from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from imbue.rsync_stats.errors import NoBytesTransferredError


class RsyncStats(BaseModel):
    """Transfer totals found in rsync output.

    Instances are immutable; the parser produces a new copy for every recognized line.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=False,
    )

    found: bool = Field(default=False, description="Whether any rsync summary line was seen")
    total_written: int = Field(default=0, description="Bytes sent by the local side")
    total_read: int = Field(default=0, description="Bytes received by the local side")
    bytes_per_second: float = Field(default=0.0, description="Transfer rate reported by rsync")
    total_size: int = Field(default=0, description="Total size of the synchronized files")

    def speedup(self) -> float:
        """Calculate the speed-up of using rsync over copying the data as-is.

        The byte counts are divided as integers before the result is converted, so
        this is 738.0 where rsync itself reports 738.83.
        """
        transferred = self.total_written + self.total_read
        if transferred == 0:
            raise NoBytesTransferredError("cannot compute speedup: rsync transferred no bytes")
        return float(self.total_size // transferred)
