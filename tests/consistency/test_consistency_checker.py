from datetime import date, datetime, time

from src.attendance_reconciliation.attendance_reconciliation.attendance.model import AttendanceRecord, HourBuckets
from src.attendance_reconciliation.attendance_reconciliation.consistency.checker import ConsistencyChecker
from src.attendance_reconciliation.attendance_reconciliation.core.enums import (
    AttendanceStatus,
    IssueKind,
    MatchNoteKind,
    MovementType,
)
from src.attendance_reconciliation.attendance_reconciliation.events.matcher import EventMatcher
from src.attendance_reconciliation.attendance_reconciliation.events.model import PunchEvent

DAY = date(2024, 3, 4)


def _record(record_id="R1", **kw):
    defaults = dict(record_id=record_id, employee_id="E1", work_date=DAY)
    defaults.update(kw)
    return AttendanceRecord(**defaults)


def _kinds(issues):
    return [i.kind for i in issues]


def test_complete_record_with_entry_only_is_incomplete():
    record = _record(entry=time(8, 10), status=AttendanceStatus.COMPLETE)

    issues = ConsistencyChecker().check(record)
    assert _kinds(issues) == [IssueKind.INCOMPLETE_PAIR]
    assert issues[0].record_id == "R1"


def test_pending_record_may_wait_for_its_exit():
    record = _record(entry=time(8, 10), status=AttendanceStatus.PENDING)
    assert ConsistencyChecker().check(record) == []


def test_exit_without_entry_is_missing_entry():
    record = _record(exit=time(17, 0))
    assert _kinds(ConsistencyChecker().check(record)) == [IssueKind.MISSING_ENTRY]


def test_exit_before_entry_is_time_order_violation():
    record = _record(entry=time(8, 0), exit=time(7, 0), status=AttendanceStatus.COMPLETE)
    assert _kinds(ConsistencyChecker().check(record)) == [IssueKind.TIME_ORDER_VIOLATION]


def test_overlapping_pairs_are_time_order_violation():
    record = _record(entry=time(8, 0), exit=time(13, 0), entry2=time(12, 0), exit2=time(17, 0))
    assert _kinds(ConsistencyChecker().check(record)) == [IssueKind.TIME_ORDER_VIOLATION]


def test_negative_buckets_are_reported():
    record = _record(entry=time(8, 0), exit=time(17, 0), buckets=HourBuckets(regular=-1.0))
    assert _kinds(ConsistencyChecker().check(record)) == [IssueKind.NEGATIVE_HOURS]


def test_orphaned_employee():
    record = _record(entry=time(8, 0), exit=time(17, 0))
    assert _kinds(ConsistencyChecker().check(record, employee_exists=False)) == [IssueKind.ORPHANED_EMPLOYEE]


def test_duplicates_keep_earliest_created():
    first = _record("R1", entry=time(8, 0), exit=time(17, 0), created_at=datetime(2024, 3, 4, 8, 0))
    second = _record("R2", entry=time(8, 3), exit=time(16, 0), created_at=datetime(2024, 3, 4, 8, 3))
    third = _record("R3", entry=time(13, 0), exit=time(16, 2), created_at=datetime(2024, 3, 4, 13, 0))

    found = ConsistencyChecker(duplicate_threshold_minutes=5).check_all([third, second, first])

    # R3 joins through its exit being near R2's exit
    for rid in ("R1", "R2", "R3"):
        assert _kinds(found[rid]) == [IssueKind.DUPLICATE]
        assert found[rid][0].keep_id == "R1"
    assert found["R2"][0].related_ids == ("R1", "R3")


def test_far_apart_records_are_not_duplicates():
    a = _record("R1", entry=time(8, 0), exit=time(12, 0))
    b = _record("R2", entry=time(13, 0), exit=time(17, 0))
    assert ConsistencyChecker().check_all([a, b]) == {"R1": [], "R2": []}


def test_deleted_records_are_skipped():
    record = _record(exit=time(17, 0), deleted_at=datetime(2024, 3, 5))
    assert ConsistencyChecker().check(record) == []
    assert ConsistencyChecker().check_all([record]) == {}


def test_check_is_idempotent_and_order_independent():
    records = [
        _record("R1", entry=time(8, 0), exit=time(7, 0)),
        _record("R2", entry=time(8, 1), status=AttendanceStatus.COMPLETE),
        _record("R3", employee_id="E2", exit=time(9, 0)),
    ]
    checker = ConsistencyChecker()
    assert checker.check_all(records) == checker.check_all(list(reversed(records)))
    assert checker.check_all(records) == checker.check_all(records)


def test_orphan_lookup_called_once_per_employee():
    calls = []

    def exists(employee_id):
        calls.append(employee_id)
        return employee_id != "E2"

    records = [_record("R1"), _record("R2", employee_id="E2"), _record("R3", employee_id="E2", work_date=date(2024, 3, 5))]
    found = ConsistencyChecker().check_all(records, employee_exists=exists)

    assert sorted(calls) == ["E1", "E2"]
    assert found["R1"] == []
    assert _kinds(found["R3"]) == [IssueKind.ORPHANED_EMPLOYEE]


def test_check_match_turns_notes_into_issues():
    def ev(eid, hh, movement):
        return PunchEvent(eid, "E1", "D1", datetime(2024, 3, 4, hh, 0), movement)

    events = [ev(str(i), 6 + i, MovementType.UNKNOWN) for i in range(5)] + [ev("x", 23, MovementType.EXIT)]
    match = EventMatcher().match(events, employee_id="E1", work_date=DAY)
    issues = ConsistencyChecker().check_match(match)

    assert match.notes_of(MatchNoteKind.OVERFLOW)
    assert IssueKind.MANUAL_REVIEW in _kinds(issues)
    assert all(not i.is_fixable for i in issues if i.kind == IssueKind.MANUAL_REVIEW)
