from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import MatchNoteKind, MovementType
from ..core.exceptions import ValidationError
from ..shifts.interval import WorkPair


@dataclass(frozen=True)
class PunchEvent:
    """One biometric scan, already decoded by the device collaborator."""

    event_id: str
    employee_id: str
    device_id: str
    timestamp: datetime
    movement: MovementType = MovementType.UNKNOWN
    confidence: float = 1.0
    processed: bool = False

    def __post_init__(self) -> None:
        if not self.event_id:
            raise ValidationError("event_id is required")
        if not self.employee_id:
            raise ValidationError(f"Event {self.event_id}: employee_id is required")
        if not isinstance(self.timestamp, datetime):
            raise ValidationError(f"Event {self.event_id}: timestamp must be a datetime")
        if not 0.0 <= float(self.confidence) <= 1.0:
            raise ValidationError(f"Event {self.event_id}: confidence must be within [0, 1]")

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class MatchNote:
    kind: MatchNoteKind
    event_id: str
    message: str


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one employee-day of punches."""

    employee_id: str
    work_date: date
    pairs: tuple[WorkPair, ...] = ()
    duplicates: tuple[PunchEvent, ...] = ()
    overflow: tuple[PunchEvent, ...] = ()
    notes: tuple[MatchNote, ...] = ()
    paired_event_ids: tuple[str, ...] = ()

    @property
    def needs_review(self) -> bool:
        return bool(self.overflow)

    @property
    def consumed_event_ids(self) -> tuple[str, ...]:
        """Events folded into the record (pairs and their duplicates); overflow stays open."""
        return self.paired_event_ids + tuple(e.event_id for e in self.duplicates)

    def notes_of(self, kind: MatchNoteKind) -> tuple[MatchNote, ...]:
        return tuple(n for n in self.notes if n.kind == kind)

    def summary(self) -> Optional[str]:
        if not self.notes:
            return None
        return "; ".join(n.message for n in self.notes)
