"""ITU-R BT.601 conversion coefficients and a simple accumulating clock."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from types import TracebackType


def _f32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Entry:
    """One row of a colour conversion: ``offset + a*scale1 + b*scale2 + c*scale3``."""

    offset: float
    scale1: float
    scale2: float
    scale3: float

    def apply(self, a, b, c):
        """Evaluate the row for three channel values (scalars or arrays)."""
        return self.offset + a * self.scale1 + b * self.scale2 + c * self.scale3


def _entry(offset: float, scale1: float, scale2: float, scale3: float) -> Entry:
    return Entry(_f32(offset), _f32(scale1), _f32(scale2), _f32(scale3))


RGB2YUV: tuple[Entry, Entry, Entry] = (
    _entry(16.0, 65.783 / 256, 129.057 / 256, 25.064 / 256),
    _entry(128.0, -37.945 / 256, -74.494 / 256, 112.439 / 256),
    _entry(128.0, 112.439 / 256, -94.154 / 256, -18.285 / 256),
)

YUV2RGB: tuple[Entry, Entry, Entry] = (
    _entry(-222.921, 298.082 / 256, 0.0, 408.583 / 256),
    _entry(135.576, 298.082 / 256, -100.291 / 256, -208.120 / 256),
    _entry(-276.836, 298.082 / 256, 516.412 / 256, 0.0),
)


class Clock:
    """Accumulates wall-clock time, in milliseconds, over start/stop intervals."""

    def __init__(self) -> None:
        self.elapsed_time: float = 0.0
        self._begin: float | None = None

    def start(self) -> None:
        """Begin a timed interval."""
        self._begin = time.perf_counter()

    def stop(self) -> None:
        """End the current interval and add its length to ``elapsed_time``."""
        if self._begin is None:
            raise RuntimeError("clock stopped before it was started")
        end = time.perf_counter()
        self.elapsed_time += (end - self._begin) * 1000.0
        self._begin = None

    def __enter__(self) -> "Clock":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()