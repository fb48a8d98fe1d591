from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import IssueKind, Severity
from ..shifts.interval import WorkPair
from .model import Issue


def order_violations(
    pairs: Sequence[WorkPair], *, employee_id: str, work_date: date, record_id: Optional[str] = None
) -> list[Issue]:
    """Exit before entry inside a pair, or a second pair starting before the first ends."""

    issues: list[Issue] = []

    def add(message: str) -> None:
        issues.append(
            Issue(
                kind=IssueKind.TIME_ORDER_VIOLATION,
                employee_id=employee_id,
                work_date=work_date,
                record_id=record_id,
                severity=Severity.HIGH,
                message=message,
            )
        )

    for index, pair in enumerate(pairs, start=1):
        if pair.is_reversed:
            add(f"Pair {index}: exit {pair.exit} is before entry {pair.entry}")

    if len(pairs) == 2:
        first_end = pairs[0].exit or pairs[0].entry
        second_start = pairs[1].entry or pairs[1].exit
        if first_end is not None and second_start is not None and second_start < first_end:
            add(f"Second pair starts at {second_start}, before the first pair ends at {first_end}")
    return issues


def unmatched_sides(
    pairs: Sequence[WorkPair], *, employee_id: str, work_date: date, record_id: Optional[str] = None
) -> list[Issue]:
    """INCOMPLETE_PAIR for entries without exit, MISSING_ENTRY for exits without entry."""

    issues: list[Issue] = []
    for index, pair in enumerate(pairs, start=1):
        if pair.is_open:
            issues.append(
                Issue(
                    kind=IssueKind.INCOMPLETE_PAIR,
                    employee_id=employee_id,
                    work_date=work_date,
                    record_id=record_id,
                    message=f"Pair {index}: entry {pair.entry} has no exit",
                )
            )
        elif pair.is_exit_only:
            issues.append(
                Issue(
                    kind=IssueKind.MISSING_ENTRY,
                    employee_id=employee_id,
                    work_date=work_date,
                    record_id=record_id,
                    message=f"Pair {index}: exit {pair.exit} has no entry",
                )
            )
    return issues
