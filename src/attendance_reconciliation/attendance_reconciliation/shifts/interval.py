from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.datetime_utils import SECONDS_PER_DAY, seconds_of_day


@dataclass(frozen=True)
class ClockInterval:
    """Half-open interval [start, end) inside one calendar day, in seconds of day."""

    start: int
    end: int

    @classmethod
    def between(cls, start: time, end: time) -> "ClockInterval":
        return cls(seconds_of_day(start), seconds_of_day(end))

    @property
    def seconds(self) -> int:
        return max(0, self.end - self.start)

    def overlap(self, other: "ClockInterval") -> int:
        return max(0, min(self.end, other.end) - max(self.start, other.start))


def day_segments(start: time, end: time) -> tuple[ClockInterval, ...]:
    """Split a clock window into same-day segments.

    A window whose end is before its start wraps midnight (22:00-06:00 gives
    [00:00, 06:00) and [22:00, 24:00)).
    """
    s, e = seconds_of_day(start), seconds_of_day(end)
    if s == e:
        return ()
    if s < e:
        return (ClockInterval(s, e),)
    return (ClockInterval(0, e), ClockInterval(s, SECONDS_PER_DAY))


@dataclass(frozen=True)
class WorkPair:
    """One entry/exit pair of a day. Either side may be missing."""

    entry: Optional[time] = None
    exit: Optional[time] = None

    @property
    def is_empty(self) -> bool:
        return self.entry is None and self.exit is None

    @property
    def is_complete(self) -> bool:
        return self.entry is not None and self.exit is not None

    @property
    def is_open(self) -> bool:
        return self.entry is not None and self.exit is None

    @property
    def is_exit_only(self) -> bool:
        return self.entry is None and self.exit is not None

    @property
    def is_reversed(self) -> bool:
        return self.is_complete and self.exit < self.entry

    def interval(self) -> ClockInterval:
        if not self.is_complete:
            raise ValueError("interval() needs both entry and exit")
        return ClockInterval.between(self.entry, self.exit)
