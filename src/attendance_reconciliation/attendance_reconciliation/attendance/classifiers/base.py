from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ...consistency.model import Issue
from ...consistency.pairs import order_violations, unmatched_sides
from ...core.enums import IssueKind
from ...core.exceptions import ValidationError
from ...shifts.interval import ClockInterval, WorkPair
from ...shifts.model import ShiftConfiguration
from ..model import AttendanceRecord, HourBuckets


@dataclass(frozen=True)
class Classification:
    """Classifier output: buckets (None when the input was rejected) plus issues."""

    buckets: Optional[HourBuckets]
    issues: tuple[Issue, ...] = ()
    worked_seconds: int = 0
    night_seconds: int = 0

    @property
    def is_classified(self) -> bool:
        return self.buckets is not None

    @property
    def is_complete(self) -> bool:
        return self.is_classified and not any(
            i.kind in (IssueKind.INCOMPLETE_PAIR, IssueKind.MISSING_ENTRY) for i in self.issues
        )


class HourClassifier(ABC):
    """Strategy Pattern: how worked time is split into regular and premium tiers.

    The shared part (validation, lunch deduction, night overlay, rounding)
    lives here; subclasses only decide the split of worked seconds.
    """

    @abstractmethod
    def split(self, worked_seconds: int, *, rest_day: bool, shift: ShiftConfiguration) -> tuple[int, int, int, int]:
        """Return (regular, recargo25, suplementario50, extraordinario100) in seconds."""

        raise NotImplementedError

    def classify(
        self,
        pairs: Sequence[WorkPair],
        *,
        employee_id: str,
        work_date: date,
        shift: ShiftConfiguration,
        lunch_minutes: Optional[int] = None,
        record_id: Optional[str] = None,
    ) -> Classification:
        if shift is None:
            raise ValidationError("A shift configuration is required")
        if len(pairs) > 2:
            raise ValidationError("At most two entry/exit pairs per day")
        if lunch_minutes is not None and lunch_minutes < 0:
            raise ValidationError("lunch_minutes must be >= 0")

        violations = order_violations(pairs, employee_id=employee_id, work_date=work_date, record_id=record_id)
        if violations:
            return Classification(buckets=None, issues=tuple(violations))

        issues = unmatched_sides(pairs, employee_id=employee_id, work_date=work_date, record_id=record_id)
        worked, night = worked_and_night_seconds(pairs, shift=shift, lunch_minutes=lunch_minutes)

        regular, r25, s50, e100 = self.split(worked, rest_day=shift.is_rest_day(work_date), shift=shift)
        counted = regular + r25 + s50 + e100
        buckets = HourBuckets.from_seconds(
            regular=regular,
            recargo25=r25,
            suplementario50=s50,
            extraordinario100=e100,
            nocturnas=min(night, counted),
        )
        return Classification(buckets=buckets, issues=tuple(issues), worked_seconds=worked, night_seconds=night)

    def classify_record(self, record: AttendanceRecord, *, shift: ShiftConfiguration) -> Classification:
        return self.classify(
            record.pairs,
            employee_id=record.employee_id,
            work_date=record.work_date,
            shift=shift,
            lunch_minutes=record.lunch_minutes,
            record_id=record.record_id,
        )


def worked_and_night_seconds(
    pairs: Sequence[WorkPair], *, shift: ShiftConfiguration, lunch_minutes: Optional[int] = None
) -> tuple[int, int]:
    """Worked seconds after lunch, and the part of them inside the night window."""

    intervals = [p.interval() for p in pairs if p.is_complete]
    window = shift.lunch.window()
    lunch_left = (shift.lunch.minutes if lunch_minutes is None else lunch_minutes) * 60

    # A break between two pairs inside the lunch window is lunch already taken.
    if len(intervals) == 2:
        gap = ClockInterval(intervals[0].end, intervals[1].start)
        lunch_left = max(0, lunch_left - gap.overlap(window))

    worked = night = 0
    for interval in intervals:
        deduction = min(lunch_left, interval.overlap(window), interval.seconds)
        lunch_left -= deduction
        pair_worked = interval.seconds - deduction
        pair_night = sum(interval.overlap(segment) for segment in shift.night_segments())
        worked += pair_worked
        night += min(pair_night, pair_worked)
    return worked, night
