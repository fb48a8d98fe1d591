from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional

from ..attendance.model import AttendanceRecord, EmployeePlacement
from ..common.datetime_utils import day_key, iso_week_key, month_key, month_start, seconds_of_day, week_start
from ..core.enums import AttendanceStatus, GroupBy, Window
from ..core.exceptions import ValidationError
from ..shifts.model import ShiftConfiguration
from .model import AggregateKey, AttendanceSummary, PartialAggregate, TrendPoint, from_centihours, to_centihours

Fold = dict[AggregateKey, PartialAggregate]


def window_of(work_date: date, window: Window) -> tuple[str, date]:
    """Canonical label and start date of the window containing `work_date`."""
    if window == Window.DAY:
        return day_key(work_date), work_date
    if window == Window.WEEK:
        return iso_week_key(work_date), week_start(work_date)
    if window == Window.MONTH:
        return month_key(work_date), month_start(work_date)
    raise ValidationError(f"Unknown window {window!r}")


def merge_folds(*folds: Fold) -> Fold:
    """Combine partial folds computed over disjoint record subsets."""
    merged: Fold = {}
    for fold in folds:
        for key, partial in fold.items():
            merged[key] = merged[key] + partial if key in merged else partial
    return merged


def _group_order(group_id: Optional[str]) -> tuple[bool, str]:
    # Unresolved placements (None) sort after every named group.
    return group_id is None, group_id or ""


class Aggregator:
    """Rolls classified records up by group (employee/area/branch) and window (day/week/month)."""

    def __init__(self, shift: ShiftConfiguration):
        if shift is None:
            raise ValidationError("A shift configuration is required")
        self._shift = shift
        self._late_after = timedelta(seconds=seconds_of_day(shift.shift_start)) + timedelta(minutes=shift.grace_minutes)
        self._early_before = timedelta(seconds=seconds_of_day(shift.shift_end)) - timedelta(minutes=shift.grace_minutes)

    def is_late(self, record: AttendanceRecord) -> bool:
        entry = record.first_entry
        return entry is not None and timedelta(seconds=seconds_of_day(entry)) > self._late_after

    def is_early_departure(self, record: AttendanceRecord) -> bool:
        last_exit = record.last_exit
        return last_exit is not None and timedelta(seconds=seconds_of_day(last_exit)) < self._early_before

    def partial_for(self, record: AttendanceRecord) -> PartialAggregate:
        """Contribution of a single record."""
        b = record.buckets
        if record.status == AttendanceStatus.ABSENT:
            return PartialAggregate(days_absent=1)

        punctual_day = not self._shift.is_rest_day(record.work_date)
        return PartialAggregate(
            regular=to_centihours(b.regular),
            recargo25=to_centihours(b.recargo25),
            suplementario50=to_centihours(b.suplementario50),
            extraordinario100=to_centihours(b.extraordinario100),
            nocturnas=to_centihours(b.nocturnas),
            days_worked=1,
            late_arrivals=int(punctual_day and self.is_late(record)),
            early_departures=int(punctual_day and self.is_early_departure(record)),
        )

    def fold(
        self,
        records: Iterable[AttendanceRecord],
        *,
        group_by: GroupBy = GroupBy.EMPLOYEE,
        window: Window = Window.MONTH,
        placements: Optional[Mapping[str, EmployeePlacement]] = None,
    ) -> Fold:
        if group_by != GroupBy.EMPLOYEE and placements is None:
            raise ValidationError(f"Grouping by {group_by.value} needs employee placements")

        totals: Fold = defaultdict(PartialAggregate)
        for record in records:
            if record.is_deleted:
                continue
            label, start = window_of(record.work_date, window)
            key = AggregateKey(group_by, self._group_id(record, group_by, placements), window, label, start)
            totals[key] = totals[key] + self.partial_for(record)
        return dict(totals)

    @staticmethod
    def _group_id(
        record: AttendanceRecord, group_by: GroupBy, placements: Optional[Mapping[str, EmployeePlacement]]
    ) -> Optional[str]:
        if group_by == GroupBy.EMPLOYEE:
            return record.employee_id
        placement = placements.get(record.employee_id)
        if placement is None:
            return None
        return placement.area_id if group_by == GroupBy.AREA else placement.branch_id

    @staticmethod
    def summaries(fold: Fold) -> list[AttendanceSummary]:
        ordered = sorted(fold.items(), key=lambda kv: (_group_order(kv[0].group_id), kv[0].start))
        return [AttendanceSummary.from_partial(key, partial) for key, partial in ordered]

    @staticmethod
    def trend(fold: Fold) -> dict[Optional[str], list[TrendPoint]]:
        """Per-group series of sub-window points in ascending chronological order."""
        series: dict[Optional[str], list[TrendPoint]] = defaultdict(list)
        for key, partial in sorted(fold.items(), key=lambda kv: (_group_order(kv[0].group_id), kv[0].start)):
            series[key.group_id].append(
                TrendPoint(
                    label=key.label,
                    start=key.start,
                    total_hours=from_centihours(partial.worked),
                    overtime_hours=from_centihours(partial.overtime),
                    days_worked=partial.days_worked,
                    attendance_rate=partial.attendance_rate,
                )
            )
        return dict(series)

    def summarize(
        self,
        records: Iterable[AttendanceRecord],
        *,
        group_by: GroupBy = GroupBy.EMPLOYEE,
        window: Window = Window.MONTH,
        placements: Optional[Mapping[str, EmployeePlacement]] = None,
    ) -> list[AttendanceSummary]:
        return self.summaries(self.fold(records, group_by=group_by, window=window, placements=placements))
