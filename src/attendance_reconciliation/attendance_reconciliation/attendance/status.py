"""Record lifecycle.

PENDING is the entry state. Approval resolves to COMPLETE, rejection and
structural violations go to INCONSISTENT, and ABSENT is terminal for the day
unless a manual override is given.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus as S
from ..core.exceptions import InvalidTransitionError, ValidationError
from .model import AttendanceRecord

ALLOWED_TRANSITIONS: dict[S, frozenset[S]] = {
    S.PENDING: frozenset({S.COMPLETE, S.MODIFIED, S.INCONSISTENT, S.UNDER_REVIEW, S.ABSENT}),
    S.COMPLETE: frozenset({S.MODIFIED, S.INCONSISTENT, S.UNDER_REVIEW}),
    S.MODIFIED: frozenset({S.COMPLETE, S.INCONSISTENT, S.UNDER_REVIEW}),
    S.INCONSISTENT: frozenset({S.COMPLETE, S.MODIFIED, S.UNDER_REVIEW}),
    S.UNDER_REVIEW: frozenset({S.COMPLETE, S.MODIFIED, S.INCONSISTENT}),
    S.ABSENT: frozenset(),
}


def can_transition(current: S, target: S) -> bool:
    return current == target or target in ALLOWED_TRANSITIONS[current]


def transition(
    record: AttendanceRecord,
    target: S,
    *,
    actor: Optional[str] = None,
    at: Optional[datetime] = None,
    notes: Optional[str] = None,
) -> AttendanceRecord:
    """Move a record to `target`; staying in the same status is a no-op."""

    if not can_transition(record.status, target):
        raise InvalidTransitionError(f"{record.status.value} -> {target.value} is not allowed")
    if record.status == target and notes is None:
        return record

    changes: dict = {"status": target}
    if notes is not None:
        changes["notes"] = notes
    if actor is not None:
        changes["modified_by"] = actor
        changes["modified_at"] = at
    return record.with_changes(**changes)


def is_resolved(record: AttendanceRecord) -> bool:
    pairs = record.pairs
    return bool(pairs) and all(p.is_complete for p in pairs)


def approve(record: AttendanceRecord, *, actor: str, at: datetime, notes: Optional[str] = None) -> AttendanceRecord:
    if not is_resolved(record):
        raise ValidationError("Only records with every entry and exit resolved can be approved")
    return transition(record, S.COMPLETE, actor=actor, at=at, notes=notes)


def reject(record: AttendanceRecord, *, actor: str, reason: str, at: datetime) -> AttendanceRecord:
    if not reason or not reason.strip():
        raise ValidationError("A rejection reason is required")
    return transition(record, S.INCONSISTENT, actor=actor, at=at, notes=reason.strip())


def send_to_review(record: AttendanceRecord, *, actor: Optional[str] = None, at: Optional[datetime] = None) -> AttendanceRecord:
    return transition(record, S.UNDER_REVIEW, actor=actor, at=at)


def override(record: AttendanceRecord, target: S, *, actor: str, reason: str, at: datetime) -> AttendanceRecord:
    """Manual override: the only way out of ABSENT."""

    if not actor:
        raise ValidationError("An override needs the acting user")
    if not reason or not reason.strip():
        raise ValidationError("An override needs a reason")
    return record.with_changes(status=target, modified_by=actor, modified_at=at, notes=reason.strip())
