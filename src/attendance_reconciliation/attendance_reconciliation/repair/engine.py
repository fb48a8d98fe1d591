from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, HourBuckets
from ..attendance.status import can_transition, transition
from ..common.datetime_utils import now_local
from ..consistency.model import Issue
from ..core.constants import HOURS_PRECISION
from ..core.enums import AttendanceStatus, IssueKind, RepairAction


@dataclass(frozen=True)
class RepairResult:
    record: AttendanceRecord
    actions: tuple[RepairAction, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.actions)


def clamp_buckets(buckets: HourBuckets) -> HourBuckets:
    """Zero the negative buckets; overtime follows its tiers."""

    clamped = replace(buckets, **{name: 0.0 for name in buckets.negative_fields()})
    overtime = round(clamped.recargo25 + clamped.suplementario50 + clamped.extraordinario100, HOURS_PRECISION)
    return replace(clamped, overtime=overtime)


class RepairEngine:
    """Applies one deterministic transform per issue kind.

    Repairs only flag or nullify: hours are never recomputed from bad input
    and missing times are never invented. Re-running on a repaired record
    changes nothing (the version is not bumped either).
    """

    _FLAG_INCONSISTENT = frozenset(
        {IssueKind.TIME_ORDER_VIOLATION, IssueKind.INCOMPLETE_PAIR, IssueKind.MISSING_ENTRY}
    )

    def repair(
        self,
        record: AttendanceRecord,
        issues: Iterable[Issue],
        *,
        actor: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> RepairResult:
        current = record
        actions: list[RepairAction] = []

        for issue in issues:
            if current.is_deleted:
                break
            if issue.record_id is not None and issue.record_id != record.record_id:
                continue

            if issue.kind in self._FLAG_INCONSISTENT:
                updated = self._set_status(current, AttendanceStatus.INCONSISTENT, actor=actor, at=at)
                action = RepairAction.MARK_INCONSISTENT
            elif issue.kind == IssueKind.MANUAL_REVIEW:
                updated = self._set_status(current, AttendanceStatus.UNDER_REVIEW, actor=actor, at=at)
                action = RepairAction.MARK_UNDER_REVIEW
            elif issue.kind == IssueKind.NEGATIVE_HOURS:
                updated = current.with_changes(buckets=clamp_buckets(current.buckets))
                action = RepairAction.CLAMP_NEGATIVE_HOURS
            elif issue.kind == IssueKind.ORPHANED_EMPLOYEE:
                updated = self._soft_delete(current, actor=actor, at=at)
                action = RepairAction.SOFT_DELETE
            elif issue.kind == IssueKind.DUPLICATE and issue.keep_id != record.record_id:
                updated = self._soft_delete(current, actor=actor, at=at)
                action = RepairAction.SOFT_DELETE
            else:
                continue

            if updated is not current:
                actions.append(action)
                current = updated

        return RepairResult(record=current, actions=tuple(actions))

    @staticmethod
    def _set_status(
        record: AttendanceRecord, target: AttendanceStatus, *, actor: Optional[str], at: Optional[datetime]
    ) -> AttendanceRecord:
        if record.status == target or not can_transition(record.status, target):
            return record
        return transition(record, target, actor=actor, at=at or now_local())

    @staticmethod
    def _soft_delete(record: AttendanceRecord, *, actor: Optional[str], at: Optional[datetime]) -> AttendanceRecord:
        if record.is_deleted:
            return record
        when = at or now_local()
        changes: dict = {"deleted_at": when}
        if actor is not None:
            changes.update(modified_by=actor, modified_at=when)
        return record.with_changes(**changes)
