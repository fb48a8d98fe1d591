from __future__ import annotations

from collections import defaultdict
from datetime import timedelta
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_DUPLICATE_THRESHOLD_MINUTES
from ..core.enums import IssueKind, MatchNoteKind, Severity
from ..core.exceptions import ValidationError
from ..events.model import MatchResult
from .model import Issue
from .rules import DEFAULT_RULES, CheckContext, ConsistencyRule


class ConsistencyChecker:
    """Runs the ordered rule set over records and returns typed issues.

    Read-only and deterministic: the same input always yields the same list,
    whatever order sibling records are given in.
    """

    def __init__(
        self,
        *,
        duplicate_threshold_minutes: int = DEFAULT_DUPLICATE_THRESHOLD_MINUTES,
        rules: Optional[Sequence[ConsistencyRule]] = None,
    ):
        if duplicate_threshold_minutes is None or duplicate_threshold_minutes < 0:
            raise ValidationError("duplicate_threshold_minutes must be >= 0")
        self._threshold = timedelta(minutes=duplicate_threshold_minutes)
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES

    def check(
        self,
        record: AttendanceRecord,
        *,
        siblings: Iterable[AttendanceRecord] = (),
        employee_exists: bool = True,
    ) -> list[Issue]:
        if record.is_deleted:
            return []
        context = CheckContext(
            siblings=tuple(siblings),
            employee_exists=employee_exists,
            duplicate_threshold=self._threshold,
        )
        issues: list[Issue] = []
        for rule in self._rules:
            issues.extend(rule.evaluate(record, context))
        return issues

    def check_all(
        self,
        records: Iterable[AttendanceRecord],
        *,
        employee_exists: Callable[[str], bool] = lambda _employee_id: True,
    ) -> dict[str, list[Issue]]:
        """Check a batch; records of the same employee-day see each other as siblings."""

        live = [r for r in records if not r.is_deleted]
        by_day: dict[tuple, list[AttendanceRecord]] = defaultdict(list)
        for r in live:
            by_day[(r.employee_id, r.work_date)].append(r)

        known: dict[str, bool] = {}
        result: dict[str, list[Issue]] = {}
        for r in sorted(live, key=lambda x: (x.employee_id, x.work_date, x.record_id)):
            if r.employee_id not in known:
                known[r.employee_id] = bool(employee_exists(r.employee_id))
            result[r.record_id] = self.check(
                r, siblings=by_day[(r.employee_id, r.work_date)], employee_exists=known[r.employee_id]
            )
        return result

    def check_match(self, match: MatchResult) -> list[Issue]:
        """Issues for an unresolved event set, before any record exists."""

        issues: list[Issue] = []
        for note in match.notes:
            if note.kind == MatchNoteKind.UNPAIRED_ENTRY:
                kind, severity = IssueKind.INCOMPLETE_PAIR, Severity.MEDIUM
            elif note.kind == MatchNoteKind.UNPAIRED_EXIT:
                kind, severity = IssueKind.MISSING_ENTRY, Severity.MEDIUM
            elif note.kind == MatchNoteKind.OVERFLOW:
                kind, severity = IssueKind.MANUAL_REVIEW, Severity.LOW
            else:
                continue
            issues.append(
                Issue(
                    kind=kind,
                    employee_id=match.employee_id,
                    work_date=match.work_date,
                    severity=severity,
                    message=note.message,
                    related_ids=(note.event_id,),
                )
            )
        return issues
