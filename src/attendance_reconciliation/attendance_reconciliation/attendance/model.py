from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional

from ..core.constants import HOURS_PRECISION
from ..core.enums import AttendanceStatus, EmployeeType
from ..core.exceptions import ValidationError
from ..shifts.interval import WorkPair

_QUANTUM = Decimal(1).scaleb(-HOURS_PRECISION)


def seconds_to_hours(seconds: int) -> float:
    """Single rounding step from exact seconds to fractional hours."""
    return float((Decimal(seconds) / Decimal(3600)).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class HourBuckets:
    """Hour breakdown of one day. `nocturnas` overlays the other buckets."""

    regular: float = 0.0
    overtime: float = 0.0
    recargo25: float = 0.0
    suplementario50: float = 0.0
    extraordinario100: float = 0.0
    nocturnas: float = 0.0

    NAMES: ClassVar[tuple[str, ...]] = (
        "regular",
        "overtime",
        "recargo25",
        "suplementario50",
        "extraordinario100",
        "nocturnas",
    )

    @classmethod
    def from_seconds(
        cls,
        *,
        regular: int,
        recargo25: int,
        suplementario50: int,
        extraordinario100: int,
        nocturnas: int,
    ) -> "HourBuckets":
        r25 = seconds_to_hours(recargo25)
        s50 = seconds_to_hours(suplementario50)
        e100 = seconds_to_hours(extraordinario100)
        return cls(
            regular=seconds_to_hours(regular),
            overtime=round(r25 + s50 + e100, HOURS_PRECISION),
            recargo25=r25,
            suplementario50=s50,
            extraordinario100=e100,
            nocturnas=seconds_to_hours(nocturnas),
        )

    @property
    def worked(self) -> float:
        return round(self.regular + self.recargo25 + self.suplementario50 + self.extraordinario100, HOURS_PRECISION)

    def negative_fields(self) -> tuple[str, ...]:
        return tuple(name for name in self.NAMES if getattr(self, name) < 0)

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in self.NAMES}


@dataclass(frozen=True)
class EmployeePlacement:
    """Master-data view of an employee used for grouping and classifier choice."""

    employee_id: str
    area_id: Optional[str] = None
    branch_id: Optional[str] = None
    employee_type: EmployeeType = EmployeeType.REGULAR


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's attendance for one calendar day.

    Instances are immutable: `with_changes` returns a copy with `version`
    bumped, or the same instance when nothing actually changes.
    """

    record_id: str
    employee_id: str
    work_date: date
    entry: Optional[time] = None
    exit: Optional[time] = None
    entry2: Optional[time] = None
    exit2: Optional[time] = None
    lunch_minutes: Optional[int] = None
    buckets: HourBuckets = HourBuckets()
    status: AttendanceStatus = AttendanceStatus.PENDING
    is_manual: bool = False
    notes: Optional[str] = None
    modified_by: Optional[str] = None
    modified_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    version: int = 1
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.record_id:
            raise ValidationError("record_id is required")
        if not self.employee_id:
            raise ValidationError("employee_id is required")
        if not isinstance(self.work_date, date):
            raise ValidationError("work_date must be a date")
        if not isinstance(self.status, AttendanceStatus):
            raise ValidationError(f"Unknown status {self.status!r}")
        if self.lunch_minutes is not None and self.lunch_minutes < 0:
            raise ValidationError("lunch_minutes must be >= 0")

    @property
    def pairs(self) -> tuple[WorkPair, ...]:
        first = WorkPair(self.entry, self.exit)
        second = WorkPair(self.entry2, self.exit2)
        if second.is_empty:
            return () if first.is_empty else (first,)
        return (first, second)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def first_entry(self) -> Optional[time]:
        entries = [p.entry for p in self.pairs if p.entry is not None]
        return min(entries) if entries else None

    @property
    def last_exit(self) -> Optional[time]:
        exits = [p.exit for p in self.pairs if p.exit is not None]
        return max(exits) if exits else None

    def with_changes(self, **changes: Any) -> "AttendanceRecord":
        if "version" in changes or "record_id" in changes:
            raise ValidationError("version and record_id are managed by the record itself")
        if all(getattr(self, key) == value for key, value in changes.items()):
            return self
        return replace(self, version=self.version + 1, **changes)

    @staticmethod
    def pair_fields(pairs: tuple[WorkPair, ...] | list[WorkPair]) -> dict[str, Optional[time]]:
        if len(pairs) > 2:
            raise ValidationError("A record holds at most two entry/exit pairs")
        padded = list(pairs) + [WorkPair()] * (2 - len(pairs))
        return {
            "entry": padded[0].entry,
            "exit": padded[0].exit,
            "entry2": padded[1].entry,
            "exit2": padded[1].exit,
        }


PATCHABLE_FIELDS = frozenset(
    f.name for f in fields(AttendanceRecord) if f.name not in {"record_id", "employee_id", "work_date", "version", "created_at"}
)


@dataclass(frozen=True)
class RecordPatch:
    """Typed partial update: known field name -> new value (None clears)."""

    changes: Mapping[str, Any]

    def __post_init__(self) -> None:
        unknown = set(self.changes) - PATCHABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown patch fields: {sorted(unknown)}")
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))

    def __bool__(self) -> bool:
        return bool(self.changes)

    @classmethod
    def between(cls, old: AttendanceRecord, new: AttendanceRecord) -> "RecordPatch":
        return cls({name: getattr(new, name) for name in sorted(PATCHABLE_FIELDS) if getattr(old, name) != getattr(new, name)})

    def apply(self, record: AttendanceRecord) -> AttendanceRecord:
        return record.with_changes(**dict(self.changes))
