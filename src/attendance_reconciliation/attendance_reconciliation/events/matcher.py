from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from ..core.constants import DEFAULT_DUPLICATE_THRESHOLD_MINUTES, MAX_PAIRS_PER_DAY
from ..core.enums import MatchNoteKind, MovementType
from ..core.exceptions import ValidationError
from ..shifts.interval import WorkPair
from .model import MatchNote, MatchResult, PunchEvent


def _compatible(a: MovementType, b: MovementType) -> bool:
    return a == b or MovementType.UNKNOWN in (a, b)


def _opposite(movement: MovementType) -> MovementType:
    return MovementType.EXIT if movement == MovementType.ENTRY else MovementType.ENTRY


class EventMatcher:
    """Turns one employee-day of raw punches into at most two entry/exit pairs.

    Steps: sort, merge near-duplicates (keep the earliest), infer unknown
    movements by position parity, then pair ENTRY/EXIT greedily.
    """

    def __init__(self, duplicate_threshold_minutes: int = DEFAULT_DUPLICATE_THRESHOLD_MINUTES):
        if duplicate_threshold_minutes is None or duplicate_threshold_minutes < 0:
            raise ValidationError("duplicate_threshold_minutes must be >= 0")
        self._threshold = timedelta(minutes=duplicate_threshold_minutes)

    def match(self, events: Iterable[PunchEvent], *, employee_id: str, work_date: date) -> MatchResult:
        ordered = sorted(events, key=lambda e: (e.timestamp, e.event_id))
        for event in ordered:
            if event.employee_id != employee_id or event.work_date != work_date:
                raise ValidationError(
                    f"Event {event.event_id} belongs to {event.employee_id}/{event.work_date}, "
                    f"not {employee_id}/{work_date}"
                )

        heads, duplicates = self._deduplicate(ordered)
        resolved, notes = self._infer_movements(heads)
        pairs, paired_ids, overflow, pair_notes = self._pair(resolved)

        return MatchResult(
            employee_id=employee_id,
            work_date=work_date,
            pairs=tuple(pairs),
            duplicates=tuple(duplicates),
            overflow=tuple(overflow),
            notes=tuple(notes + pair_notes),
            paired_event_ids=tuple(paired_ids),
        )

    def _deduplicate(self, ordered: list[PunchEvent]) -> tuple[list[list], list[PunchEvent]]:
        # Each head is [earliest event, effective movement of its cluster].
        heads: list[list] = []
        duplicates: list[PunchEvent] = []
        for event in ordered:
            if heads:
                head, movement = heads[-1]
                if event.timestamp - head.timestamp <= self._threshold and _compatible(movement, event.movement):
                    duplicates.append(event)
                    if movement == MovementType.UNKNOWN:
                        heads[-1][1] = event.movement
                    continue
            heads.append([event, event.movement])
        return heads, duplicates

    @staticmethod
    def _infer_movements(heads: list[list]) -> tuple[list[tuple[PunchEvent, MovementType]], list[MatchNote]]:
        resolved: list[tuple[PunchEvent, MovementType]] = []
        notes: list[MatchNote] = []
        expected = MovementType.ENTRY
        for event, movement in heads:
            if movement == MovementType.UNKNOWN:
                movement = expected
                notes.append(
                    MatchNote(
                        kind=MatchNoteKind.INFERRED_MOVEMENT,
                        event_id=event.event_id,
                        message=f"{event.timestamp:%H:%M:%S} inferred as {movement.value}",
                    )
                )
            resolved.append((event, movement))
            expected = _opposite(movement)
        return resolved, notes

    @staticmethod
    def _pair(resolved: list[tuple[PunchEvent, MovementType]]):
        pairs: list[WorkPair] = []
        paired_ids: list[str] = []
        overflow: list[PunchEvent] = []
        notes: list[MatchNote] = []

        def emit(pair: WorkPair, members: list[PunchEvent]) -> None:
            if len(pairs) < MAX_PAIRS_PER_DAY:
                pairs.append(pair)
                paired_ids.extend(e.event_id for e in members)
                return
            overflow.extend(members)
            for e in members:
                notes.append(
                    MatchNote(
                        kind=MatchNoteKind.OVERFLOW,
                        event_id=e.event_id,
                        message=f"{e.timestamp:%H:%M:%S} is beyond the second pair and needs review",
                    )
                )

        def unpaired_entry(e: PunchEvent) -> MatchNote:
            return MatchNote(
                kind=MatchNoteKind.UNPAIRED_ENTRY,
                event_id=e.event_id,
                message=f"Entry at {e.timestamp:%H:%M:%S} has no matching exit",
            )

        open_entry: PunchEvent | None = None
        for event, movement in resolved:
            clock = event.timestamp.time().replace(microsecond=0)
            if movement == MovementType.ENTRY:
                if open_entry is not None:
                    notes.append(unpaired_entry(open_entry))
                    emit(WorkPair(open_entry.timestamp.time().replace(microsecond=0), None), [open_entry])
                open_entry = event
            elif open_entry is not None:
                emit(WorkPair(open_entry.timestamp.time().replace(microsecond=0), clock), [open_entry, event])
                open_entry = None
            else:
                notes.append(
                    MatchNote(
                        kind=MatchNoteKind.UNPAIRED_EXIT,
                        event_id=event.event_id,
                        message=f"Exit at {event.timestamp:%H:%M:%S} has no preceding entry",
                    )
                )
                emit(WorkPair(None, clock), [event])

        if open_entry is not None:
            notes.append(unpaired_entry(open_entry))
            emit(WorkPair(open_entry.timestamp.time().replace(microsecond=0), None), [open_entry])

        return pairs, paired_ids, overflow, notes
