from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.enums import GroupBy, Window


def to_centihours(hours: float) -> int:
    return int((Decimal(str(hours)) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def from_centihours(value: int) -> float:
    return float(Decimal(value) / 100)


@dataclass(frozen=True)
class AggregateKey:
    group_by: GroupBy
    group_id: Optional[str]
    window: Window
    label: str
    start: date


@dataclass(frozen=True)
class PartialAggregate:
    """Additive counters for one group and window.

    Hours are kept as integer hundredths so that combining partial results is
    exact: any partition of a record set adds up to the same totals.
    """

    regular: int = 0
    recargo25: int = 0
    suplementario50: int = 0
    extraordinario100: int = 0
    nocturnas: int = 0
    days_worked: int = 0
    days_absent: int = 0
    late_arrivals: int = 0
    early_departures: int = 0

    def __add__(self, other: "PartialAggregate") -> "PartialAggregate":
        if not isinstance(other, PartialAggregate):
            return NotImplemented
        return PartialAggregate(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    @property
    def overtime(self) -> int:
        return self.recargo25 + self.suplementario50 + self.extraordinario100

    @property
    def worked(self) -> int:
        return self.regular + self.overtime

    @property
    def days_scheduled(self) -> int:
        return self.days_worked + self.days_absent

    @property
    def attendance_rate(self) -> float:
        if self.days_scheduled == 0:
            return 0.0
        return round(self.days_worked / self.days_scheduled * 100, 2)


@dataclass(frozen=True)
class AttendanceSummary:
    group_by: GroupBy
    group_id: Optional[str]
    window: Window
    label: str
    total_hours: float
    regular_hours: float
    overtime_hours: float
    recargo25: float
    suplementario50: float
    extraordinario100: float
    nocturnas: float
    days_worked: int
    days_absent: int
    days_scheduled: int
    late_arrivals: int
    early_departures: int
    attendance_rate: float

    @classmethod
    def from_partial(cls, key: AggregateKey, partial: PartialAggregate) -> "AttendanceSummary":
        return cls(
            group_by=key.group_by,
            group_id=key.group_id,
            window=key.window,
            label=key.label,
            total_hours=from_centihours(partial.worked),
            regular_hours=from_centihours(partial.regular),
            overtime_hours=from_centihours(partial.overtime),
            recargo25=from_centihours(partial.recargo25),
            suplementario50=from_centihours(partial.suplementario50),
            extraordinario100=from_centihours(partial.extraordinario100),
            nocturnas=from_centihours(partial.nocturnas),
            days_worked=partial.days_worked,
            days_absent=partial.days_absent,
            days_scheduled=partial.days_scheduled,
            late_arrivals=partial.late_arrivals,
            early_departures=partial.early_departures,
            attendance_rate=partial.attendance_rate,
        )

    def as_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["group_by"] = self.group_by.value
        data["window"] = self.window.value
        return data


@dataclass(frozen=True)
class TrendPoint:
    label: str
    start: date
    total_hours: float
    overtime_hours: float
    days_worked: int
    attendance_rate: float
