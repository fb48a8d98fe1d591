from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import IssueKind, Severity


@dataclass(frozen=True)
class Issue:
    """A data-quality finding. Returned as a value, never raised."""

    kind: IssueKind
    employee_id: str
    work_date: date
    message: str
    severity: Severity = Severity.MEDIUM
    record_id: Optional[str] = None
    related_ids: tuple[str, ...] = ()
    keep_id: Optional[str] = None

    @property
    def is_fixable(self) -> bool:
        return self.kind is not IssueKind.MANUAL_REVIEW

    def as_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "employee_id": self.employee_id,
            "work_date": self.work_date.isoformat(),
            "message": self.message,
            "severity": self.severity.value,
            "record_id": self.record_id,
            "related_ids": list(self.related_ids),
            "keep_id": self.keep_id,
        }
