from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import seconds_of_day
from ..core.enums import AttendanceStatus, IssueKind, Severity
from .model import Issue
from .pairs import order_violations, unmatched_sides


@dataclass(frozen=True)
class CheckContext:
    """What a rule may look at besides the record itself."""

    siblings: tuple[AttendanceRecord, ...] = ()
    employee_exists: bool = True
    duplicate_threshold: timedelta = timedelta(minutes=5)


class ConsistencyRule(ABC):
    """Strategy Pattern: one predicate of the consistency check."""

    kind: IssueKind

    @abstractmethod
    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        raise NotImplementedError


class IncompletePairRule(ConsistencyRule):
    """Entry without exit is only acceptable while the record is PENDING."""

    kind = IssueKind.INCOMPLETE_PAIR

    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        if record.status == AttendanceStatus.PENDING:
            return []
        found = unmatched_sides(
            record.pairs, employee_id=record.employee_id, work_date=record.work_date, record_id=record.record_id
        )
        return [i for i in found if i.kind == self.kind]


class MissingEntryRule(ConsistencyRule):
    kind = IssueKind.MISSING_ENTRY

    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        found = unmatched_sides(
            record.pairs, employee_id=record.employee_id, work_date=record.work_date, record_id=record.record_id
        )
        return [i for i in found if i.kind == self.kind]


class TimeOrderRule(ConsistencyRule):
    kind = IssueKind.TIME_ORDER_VIOLATION

    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        return order_violations(
            record.pairs, employee_id=record.employee_id, work_date=record.work_date, record_id=record.record_id
        )


class NegativeHoursRule(ConsistencyRule):
    kind = IssueKind.NEGATIVE_HOURS

    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        negative = record.buckets.negative_fields()
        if not negative:
            return []
        return [
            Issue(
                kind=self.kind,
                employee_id=record.employee_id,
                work_date=record.work_date,
                record_id=record.record_id,
                severity=Severity.HIGH,
                message=f"Negative hour buckets: {', '.join(negative)}",
            )
        ]


def _near(a: AttendanceRecord, b: AttendanceRecord, threshold: timedelta) -> bool:
    limit = threshold.total_seconds()
    for left, right in ((a.entry, b.entry), (a.exit, b.exit)):
        if left is not None and right is not None and abs(seconds_of_day(left) - seconds_of_day(right)) <= limit:
            return True
    return False


def _creation_key(record: AttendanceRecord) -> tuple[datetime, str]:
    return (record.created_at or datetime.min, record.record_id)


class DuplicateRule(ConsistencyRule):
    """Same employee and day with entries (or exits) within the threshold.

    Duplicates are grouped transitively; the earliest-created record of the
    group is the one to keep.
    """

    kind = IssueKind.DUPLICATE

    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        candidates = [
            s
            for s in context.siblings
            if s.record_id != record.record_id
            and not s.is_deleted
            and s.employee_id == record.employee_id
            and s.work_date == record.work_date
        ]
        group = {record.record_id: record}
        frontier = [record]
        while frontier:
            current = frontier.pop()
            for other in candidates:
                if other.record_id not in group and _near(current, other, context.duplicate_threshold):
                    group[other.record_id] = other
                    frontier.append(other)
        if len(group) < 2:
            return []

        keeper = min(group.values(), key=_creation_key)
        related = tuple(sorted(rid for rid in group if rid != record.record_id))
        return [
            Issue(
                kind=self.kind,
                employee_id=record.employee_id,
                work_date=record.work_date,
                record_id=record.record_id,
                message=f"Duplicate of {', '.join(related)}; keeping {keeper.record_id}",
                related_ids=related,
                keep_id=keeper.record_id,
            )
        ]


class OrphanedEmployeeRule(ConsistencyRule):
    kind = IssueKind.ORPHANED_EMPLOYEE

    def evaluate(self, record: AttendanceRecord, context: CheckContext) -> list[Issue]:
        if context.employee_exists:
            return []
        return [
            Issue(
                kind=self.kind,
                employee_id=record.employee_id,
                work_date=record.work_date,
                record_id=record.record_id,
                severity=Severity.HIGH,
                message=f"Employee {record.employee_id} can no longer be resolved",
            )
        ]


DEFAULT_RULES: tuple[ConsistencyRule, ...] = (
    IncompletePairRule(),
    MissingEntryRule(),
    TimeOrderRule(),
    NegativeHoursRule(),
    DuplicateRule(),
    OrphanedEmployeeRule(),
)
