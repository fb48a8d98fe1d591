from datetime import date, datetime, time

import pytest

from src.attendance_reconciliation.attendance_reconciliation.attendance import status as lifecycle
from src.attendance_reconciliation.attendance_reconciliation.attendance.model import (
    AttendanceRecord,
    HourBuckets,
    RecordPatch,
)
from src.attendance_reconciliation.attendance_reconciliation.core.enums import AttendanceStatus
from src.attendance_reconciliation.attendance_reconciliation.core.exceptions import (
    InvalidTransitionError,
    ValidationError,
)

NOW = datetime(2024, 3, 4, 18, 0)


def _record(**kw):
    defaults = dict(record_id="R1", employee_id="E1", work_date=date(2024, 3, 4))
    defaults.update(kw)
    return AttendanceRecord(**defaults)


def test_record_requires_ids_and_date():
    with pytest.raises(ValidationError):
        _record(record_id="")
    with pytest.raises(ValidationError):
        _record(employee_id="")
    with pytest.raises(ValidationError):
        _record(work_date="2024-03-04")
    with pytest.raises(ValidationError):
        _record(lunch_minutes=-1)


def test_with_changes_bumps_version_only_on_real_change():
    r = _record(entry=time(8, 0))

    assert r.with_changes(entry=time(8, 0)) is r
    changed = r.with_changes(exit=time(17, 0))
    assert changed.version == 2
    assert r.version == 1
    with pytest.raises(ValidationError):
        r.with_changes(version=5)


def test_pairs_and_extremes():
    r = _record(entry=time(8, 0), exit=time(12, 0), entry2=time(13, 0), exit2=time(17, 30))

    assert len(r.pairs) == 2
    assert r.first_entry == time(8, 0)
    assert r.last_exit == time(17, 30)
    assert _record().pairs == ()


def test_record_patch_rejects_unknown_and_identity_fields():
    with pytest.raises(ValidationError):
        RecordPatch({"salary": 10})
    with pytest.raises(ValidationError):
        RecordPatch({"record_id": "R2"})


def test_record_patch_between_and_apply():
    old = _record(entry=time(8, 0), exit=time(17, 0))
    new = old.with_changes(exit=None, notes="cleared")

    patch = RecordPatch.between(old, new)
    assert dict(patch.changes) == {"exit": None, "notes": "cleared"}
    assert patch.apply(old) == new
    assert not RecordPatch.between(old, old)


def test_approve_requires_resolved_pairs():
    with pytest.raises(ValidationError):
        lifecycle.approve(_record(entry=time(8, 0)), actor="boss", at=NOW)
    with pytest.raises(ValidationError):
        lifecycle.approve(_record(), actor="boss", at=NOW)

    approved = lifecycle.approve(
        _record(entry=time(8, 0), exit=time(17, 0), status=AttendanceStatus.INCONSISTENT), actor="boss", at=NOW
    )
    assert approved.status == AttendanceStatus.COMPLETE
    assert approved.modified_by == "boss"
    assert approved.modified_at == NOW


def test_reject_needs_reason_and_goes_inconsistent():
    r = _record(entry=time(8, 0), exit=time(17, 0), status=AttendanceStatus.COMPLETE)

    with pytest.raises(ValidationError):
        lifecycle.reject(r, actor="boss", reason="  ", at=NOW)
    rejected = lifecycle.reject(r, actor="boss", reason="wrong device", at=NOW)
    assert rejected.status == AttendanceStatus.INCONSISTENT
    assert rejected.notes == "wrong device"


def test_absent_is_terminal_without_override():
    absent = _record(status=AttendanceStatus.ABSENT)

    for target in (AttendanceStatus.COMPLETE, AttendanceStatus.INCONSISTENT, AttendanceStatus.UNDER_REVIEW):
        with pytest.raises(InvalidTransitionError):
            lifecycle.transition(absent, target)

    restored = lifecycle.override(absent, AttendanceStatus.MODIFIED, actor="hr", reason="medical leave", at=NOW)
    assert restored.status == AttendanceStatus.MODIFIED
    assert restored.modified_by == "hr"
    with pytest.raises(ValidationError):
        lifecycle.override(absent, AttendanceStatus.MODIFIED, actor="hr", reason="", at=NOW)


def test_complete_cannot_go_back_to_pending_or_absent():
    r = _record(status=AttendanceStatus.COMPLETE)

    with pytest.raises(InvalidTransitionError):
        lifecycle.transition(r, AttendanceStatus.PENDING)
    with pytest.raises(InvalidTransitionError):
        lifecycle.transition(r, AttendanceStatus.ABSENT)


def test_same_status_transition_is_noop():
    r = _record(status=AttendanceStatus.UNDER_REVIEW)
    assert lifecycle.transition(r, AttendanceStatus.UNDER_REVIEW) is r


def test_every_non_absent_status_can_be_flagged():
    for status in AttendanceStatus:
        if status == AttendanceStatus.ABSENT:
            continue
        assert lifecycle.can_transition(status, AttendanceStatus.INCONSISTENT)
        assert lifecycle.can_transition(status, AttendanceStatus.UNDER_REVIEW)


def test_buckets_worked_and_negative_fields():
    b = HourBuckets(regular=8.0, overtime=1.0, recargo25=1.0, nocturnas=-0.5)
    assert b.worked == 9.0
    assert b.negative_fields() == ("nocturnas",)
