from datetime import date, datetime, time, timedelta

import pytest

from src.attendance_reconciliation.attendance_reconciliation.attendance.model import (
    AttendanceRecord,
    EmployeePlacement,
    HourBuckets,
)
from src.attendance_reconciliation.attendance_reconciliation.core.enums import AttendanceStatus, GroupBy, Window
from src.attendance_reconciliation.attendance_reconciliation.core.exceptions import ValidationError
from src.attendance_reconciliation.attendance_reconciliation.reports.aggregator import Aggregator, merge_folds
from src.attendance_reconciliation.attendance_reconciliation.reports.model import PartialAggregate
from src.attendance_reconciliation.attendance_reconciliation.shifts.model import ShiftConfiguration

SHIFT = ShiftConfiguration()


def _worked(record_id, day, *, employee_id="E1", entry=time(8, 0), exit=time(17, 0), regular=8.0, r25=0.0, night=0.0):
    return AttendanceRecord(
        record_id=record_id,
        employee_id=employee_id,
        work_date=day,
        entry=entry,
        exit=exit,
        buckets=HourBuckets(regular=regular, overtime=r25, recargo25=r25, nocturnas=night),
        status=AttendanceStatus.COMPLETE,
    )


def _absent(record_id, day, employee_id="E1"):
    return AttendanceRecord(record_id=record_id, employee_id=employee_id, work_date=day, status=AttendanceStatus.ABSENT)


def _weekdays(start, count):
    days, d = [], start
    while len(days) < count:
        if d.weekday() < 5:
            days.append(d)
        d += timedelta(days=1)
    return days


def test_attendance_rate_twenty_of_twenty_two():
    days = _weekdays(date(2024, 7, 1), 22)
    records = [_worked(f"R{i}", d) for i, d in enumerate(days[:20])] + [_absent(f"A{i}", d) for i, d in enumerate(days[20:])]

    [summary] = Aggregator(SHIFT).summarize(records, window=Window.MONTH)

    assert summary.label == "2024-07"
    assert summary.days_worked == 20
    assert summary.days_absent == 2
    assert summary.days_scheduled == 22
    assert summary.attendance_rate == 90.91
    assert summary.total_hours == 160.0


def test_zero_scheduled_days_gives_zero_rate():
    assert Aggregator(SHIFT).summarize([]) == []
    assert PartialAggregate().attendance_rate == 0.0


def test_fold_is_associative_over_any_partition():
    days = _weekdays(date(2024, 3, 1), 15)
    records = [
        _worked(f"R{i}", d, regular=7.33, r25=0.17 * (i % 3), night=0.01 * i, employee_id=f"E{i % 2}")
        for i, d in enumerate(days)
    ]
    aggregator = Aggregator(SHIFT)

    whole = aggregator.fold(records, window=Window.WEEK)
    for cut in (1, 4, 7, 14):
        parts = merge_folds(aggregator.fold(records[:cut], window=Window.WEEK), aggregator.fold(records[cut:], window=Window.WEEK))
        assert parts == whole

    a = aggregator.fold(records[:5])
    b = aggregator.fold(records[5:9])
    c = aggregator.fold(records[9:])
    assert merge_folds(merge_folds(a, b), c) == merge_folds(a, merge_folds(b, c))


def test_late_arrivals_and_early_departures_use_configured_grace():
    monday = date(2024, 3, 4)
    records = [
        _worked("R1", monday, entry=time(8, 5), exit=time(16, 55)),
        _worked("R2", monday + timedelta(days=1), entry=time(8, 6), exit=time(17, 0)),
        _worked("R3", monday + timedelta(days=2), entry=time(8, 0), exit=time(16, 54)),
        _worked("R4", date(2024, 3, 9), entry=time(10, 0), exit=time(12, 0)),  # Saturday
    ]

    [summary] = Aggregator(SHIFT).summarize(records)

    assert summary.late_arrivals == 1
    assert summary.early_departures == 1


def test_thresholds_follow_shift_configuration():
    shift = ShiftConfiguration(shift_start=time(9, 0), shift_end=time(18, 0), grace_minutes=0)
    record = _worked("R1", date(2024, 3, 4), entry=time(8, 59), exit=time(17, 30))

    [summary] = Aggregator(shift).summarize([record])

    assert summary.late_arrivals == 0
    assert summary.early_departures == 1


def test_windows_use_canonical_labels():
    record = _worked("R1", date(2024, 12, 30))
    aggregator = Aggregator(SHIFT)

    assert [s.label for s in aggregator.summarize([record], window=Window.DAY)] == ["2024-12-30"]
    assert [s.label for s in aggregator.summarize([record], window=Window.WEEK)] == ["2025-W01"]
    assert [s.label for s in aggregator.summarize([record], window=Window.MONTH)] == ["2024-12"]


def test_trend_is_chronological_per_group():
    records = [
        _worked("R3", date(2024, 3, 18)),
        _worked("R1", date(2024, 3, 4)),
        _worked("R2", date(2024, 3, 11), r25=1.0),
        _worked("R4", date(2024, 3, 4), employee_id="E2"),
    ]
    aggregator = Aggregator(SHIFT)

    trend = aggregator.trend(aggregator.fold(records, window=Window.WEEK))

    assert [p.label for p in trend["E1"]] == ["2024-W10", "2024-W11", "2024-W12"]
    assert trend["E1"][1].overtime_hours == 1.0
    assert [p.label for p in trend["E2"]] == ["2024-W10"]


def test_group_by_area_and_branch_with_unresolved_employee():
    placements = {
        "E1": EmployeePlacement("E1", area_id="OPS", branch_id="QUITO"),
        "E2": EmployeePlacement("E2", area_id="OPS", branch_id="GYE"),
    }
    day = date(2024, 3, 4)
    records = [_worked("R1", day), _worked("R2", day, employee_id="E2"), _worked("R3", day, employee_id="E9")]
    aggregator = Aggregator(SHIFT)

    by_area = {s.group_id: s for s in aggregator.summarize(records, group_by=GroupBy.AREA, placements=placements)}
    by_branch = {s.group_id: s for s in aggregator.summarize(records, group_by=GroupBy.BRANCH, placements=placements)}

    assert by_area["OPS"].days_worked == 2
    assert by_area[None].days_worked == 1
    assert set(by_branch) == {"QUITO", "GYE", None}



def test_unresolved_group_sorts_last_and_apart_from_empty_ids():
    placements = {
        "E1": EmployeePlacement("E1", area_id="OPS"),
        "E2": EmployeePlacement("E2", area_id=""),
    }
    day = date(2024, 3, 4)
    records = [_worked("R1", day), _worked("R2", day, employee_id="E2"), _worked("R3", day, employee_id="E9")]
    aggregator = Aggregator(SHIFT)
    fold = aggregator.fold(records, group_by=GroupBy.AREA, placements=placements)

    assert [s.group_id for s in aggregator.summaries(fold)] == ["", "OPS", None]
    assert list(aggregator.trend(fold)) == ["", "OPS", None]
    assert all(s.days_worked == 1 for s in aggregator.summaries(fold))

def test_grouping_without_placements_is_rejected():
    with pytest.raises(ValidationError):
        Aggregator(SHIFT).fold([], group_by=GroupBy.BRANCH)


def test_deleted_records_are_ignored():
    record = _worked("R1", date(2024, 3, 4))
    deleted = AttendanceRecord(
        record_id="R2",
        employee_id="E1",
        work_date=date(2024, 3, 5),
        status=AttendanceStatus.COMPLETE,
        buckets=HourBuckets(regular=8.0),
        deleted_at=datetime(2024, 3, 6),
    )

    [summary] = Aggregator(SHIFT).summarize([record, deleted])

    assert summary.days_worked == 1
    assert summary.total_hours == 8.0
