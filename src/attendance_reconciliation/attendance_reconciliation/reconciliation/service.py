from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable, Iterable, Iterator, Mapping, Optional, Sequence

from ..attendance import status as lifecycle
from ..attendance.factory import ClassifierFactory
from ..attendance.model import AttendanceRecord, EmployeePlacement, HourBuckets, RecordPatch
from ..attendance.repository import EventStore, MasterData, RecordStore
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_positive
from ..consistency.checker import ConsistencyChecker
from ..consistency.model import Issue
from ..core.constants import DEFAULT_BATCH_CHUNK_SIZE, DEFAULT_PAGE_LIMIT
from ..core.enums import AttendanceStatus, GroupBy, IssueKind, MovementType, RepairAction, Severity, Window
from ..core.exceptions import InvalidTransitionError, NotFoundError, StoreError, ValidationError, VersionConflict
from ..events.matcher import EventMatcher
from ..events.model import MatchResult, PunchEvent
from ..repair.engine import RepairEngine
from ..reports.aggregator import Aggregator, Fold, merge_folds
from ..shifts.interval import WorkPair
from ..shifts.model import ShiftConfiguration

logger = logging.getLogger(__name__)

# Device id of the events rebuilt from an already stored record.
STORED_PUNCH_DEVICE = "stored-record"

_LOCKED_STATUSES = frozenset({AttendanceStatus.MODIFIED, AttendanceStatus.ABSENT})


@dataclass(frozen=True)
class ReconcileOutcome:
    employee_id: str
    work_date: date
    record: Optional[AttendanceRecord]
    match: Optional[MatchResult] = None
    issues: tuple[Issue, ...] = ()
    actions: tuple[RepairAction, ...] = ()
    created: bool = False
    written: bool = False


@dataclass(frozen=True)
class BatchItemOutcome:
    record_id: str
    ok: bool
    actions: tuple[RepairAction, ...] = ()
    error: Optional[str] = None
    skipped: bool = False


@dataclass(frozen=True)
class AggregationRun:
    partials: Fold
    cancelled: bool = False
    chunks_processed: int = 0


@dataclass(frozen=True)
class ValidationReport:
    records_checked: int
    issues: tuple[Issue, ...]

    @property
    def is_consistent(self) -> bool:
        return not self.issues

    @property
    def fixable_count(self) -> int:
        return sum(1 for i in self.issues if i.is_fixable)

    @property
    def manual_count(self) -> int:
        return len(self.issues) - self.fixable_count

    def count_by_kind(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for issue in self.issues:
            counts[issue.kind.value] = counts.get(issue.kind.value, 0) + 1
        return counts


def chunked(items: Sequence, size: int) -> Iterator[Sequence]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


def append_note(current: Optional[str], addition: Optional[str]) -> Optional[str]:
    """Add `addition` as a new line of `current` unless that line is already there."""

    if not addition:
        return current
    if not current:
        return addition
    if addition in current.splitlines():
        return current
    return f"{current}\n{addition}"


class ReconciliationService:
    """Use cases around daily attendance records.

    Wires the pure components (matcher, classifier, checker, repair,
    aggregator) to the record/event stores and master data.
    """

    def __init__(
        self,
        records: RecordStore,
        events: EventStore,
        master_data: MasterData,
        *,
        shift: ShiftConfiguration,
        matcher: EventMatcher | None = None,
        checker: ConsistencyChecker | None = None,
        repair_engine: RepairEngine | None = None,
        classifier_factory: ClassifierFactory | None = None,
        chunk_size: int = DEFAULT_BATCH_CHUNK_SIZE,
        id_factory: Callable[[], str] | None = None,
        log: logging.Logger | None = None,
    ):
        if shift is None:
            raise ValidationError("A shift configuration is required")
        require_positive(chunk_size, "chunk_size")
        self._records = records
        self._events = events
        self._master = master_data
        self._shift = shift
        self._matcher = matcher or EventMatcher()
        self._checker = checker or ConsistencyChecker()
        self._repair = repair_engine or RepairEngine()
        self._factory = classifier_factory or ClassifierFactory()
        self._aggregator = Aggregator(shift)
        self._chunk_size = int(chunk_size)
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._log = log or logger

    @property
    def shift(self) -> ShiftConfiguration:
        return self._shift

    # ------------------------------------------------------------------
    # Punch reconciliation
    # ------------------------------------------------------------------
    def reconcile_day(
        self,
        employee_id: str,
        work_date: date,
        *,
        actor: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> ReconcileOutcome:
        """Fold the unprocessed punches of one employee-day into its record."""

        require_non_empty(employee_id, "employee_id")
        at = at or now_local()

        pending = list(self._events.get_unprocessed(employee_id, work_date))
        live = [r for r in self._records.get_for_employee_and_date(employee_id, work_date) if not r.is_deleted]
        existing = min(live, key=lambda r: (r.created_at or datetime.min, r.record_id)) if live else None

        if not pending:
            return ReconcileOutcome(employee_id=employee_id, work_date=work_date, record=existing)

        placement = self._master.resolve_employee(employee_id)
        if placement is None:
            issue = Issue(
                kind=IssueKind.ORPHANED_EMPLOYEE,
                employee_id=employee_id,
                work_date=work_date,
                severity=Severity.HIGH,
                message=f"{len(pending)} punches for unknown employee {employee_id}",
                related_ids=tuple(e.event_id for e in pending),
            )
            self._log.warning("Skipping punches of unknown employee %s on %s", employee_id, work_date)
            return ReconcileOutcome(employee_id=employee_id, work_date=work_date, record=existing, issues=(issue,))

        if existing is not None and (existing.is_manual or existing.status in _LOCKED_STATUSES):
            issue = Issue(
                kind=IssueKind.MANUAL_REVIEW,
                employee_id=employee_id,
                work_date=work_date,
                record_id=existing.record_id,
                severity=Severity.LOW,
                message=f"{len(pending)} new punches for a {existing.status.value} record",
                related_ids=tuple(e.event_id for e in pending),
            )
            self._log.warning(
                "Record %s is %s; %d punches left for review", existing.record_id, existing.status.value, len(pending)
            )
            return ReconcileOutcome(employee_id=employee_id, work_date=work_date, record=existing, issues=(issue,))

        pending, strays = self._split_by_device(pending)
        if strays:
            self._log.warning(
                "%d punches of %s on %s come from unregistered devices", len(strays), employee_id, work_date
            )
        if not pending:
            issue = self._stray_issue(strays, employee_id, work_date, existing)
            return ReconcileOutcome(employee_id=employee_id, work_date=work_date, record=existing, issues=(issue,))

        match = self._matcher.match(
            pending + self._stored_punches(existing), employee_id=employee_id, work_date=work_date
        )
        displaced = tuple(e.event_id for e in match.overflow if e.device_id == STORED_PUNCH_DEVICE)
        if existing is not None and displaced:
            return self._hold_for_review(existing, pending, match, displaced, actor=actor, at=at)

        candidate = self._candidate(
            existing, match, placement, employee_id=employee_id, work_date=work_date, at=at, hold=bool(strays)
        )

        siblings = [r for r in live if r.record_id != candidate.record_id] + [candidate]
        issues = self._checker.check(candidate, siblings=siblings)
        issues += [
            replace(i, record_id=candidate.record_id)
            for i in self._checker.check_match(match)
            if i.kind == IssueKind.MANUAL_REVIEW
        ]
        if strays:
            issues.append(self._stray_issue(strays, employee_id, work_date, candidate))
        repaired = self._repair.repair(candidate, issues, actor=actor, at=at)

        if existing is None:
            saved = self._records.create(repaired.record)
            written = True
        else:
            patch = RecordPatch.between(existing, repaired.record)
            written = bool(patch)
            saved = self._commit(existing, patch) if written else existing

        pending_ids = {e.event_id for e in pending}
        consumed = [eid for eid in match.consumed_event_ids if eid in pending_ids]
        if consumed:
            self._events.mark_processed(consumed, saved.record_id)

        self._log.info(
            "Reconciled %s on %s: record=%s status=%s pairs=%d issues=%d overflow=%d",
            employee_id,
            work_date,
            saved.record_id,
            saved.status.value,
            len(match.pairs),
            len(issues),
            len(match.overflow),
        )
        return ReconcileOutcome(
            employee_id=employee_id,
            work_date=work_date,
            record=saved,
            match=match,
            issues=tuple(issues),
            actions=repaired.actions,
            created=existing is None,
            written=written,
        )

    def _hold_for_review(
        self,
        existing: AttendanceRecord,
        pending: list[PunchEvent],
        match: MatchResult,
        displaced: tuple[str, ...],
        *,
        actor: Optional[str],
        at: datetime,
    ) -> ReconcileOutcome:
        """New punches would push stored times out of the record: keep the times, flag the day."""

        issue = Issue(
            kind=IssueKind.MANUAL_REVIEW,
            employee_id=existing.employee_id,
            work_date=existing.work_date,
            record_id=existing.record_id,
            severity=Severity.HIGH,
            message=f"{len(pending)} new punches would displace stored times ({', '.join(displaced)})",
            related_ids=tuple(e.event_id for e in pending),
        )
        repaired = self._repair.repair(existing, [issue], actor=actor, at=at)
        saved = self._save(existing, repaired.record)
        self._log.warning(
            "Record %s kept for review; %d punches left unprocessed", existing.record_id, len(pending)
        )
        return ReconcileOutcome(
            employee_id=existing.employee_id,
            work_date=existing.work_date,
            record=saved,
            match=match,
            issues=(issue,),
            actions=repaired.actions,
            written=saved is not existing,
        )

    def _split_by_device(self, events: list[PunchEvent]) -> tuple[list[PunchEvent], list[PunchEvent]]:
        """Separate punches from devices master data knows from the rest."""

        known: dict[str, bool] = {}
        accepted: list[PunchEvent] = []
        strays: list[PunchEvent] = []
        for event in events:
            if event.device_id not in known:
                known[event.device_id] = self._master.resolve_device(event.device_id) is not None
            (accepted if known[event.device_id] else strays).append(event)
        return accepted, strays

    @staticmethod
    def _stray_issue(
        strays: list[PunchEvent], employee_id: str, work_date: date, record: Optional[AttendanceRecord]
    ) -> Issue:
        devices = ", ".join(sorted({e.device_id or "?" for e in strays}))
        return Issue(
            kind=IssueKind.MANUAL_REVIEW,
            employee_id=employee_id,
            work_date=work_date,
            record_id=record.record_id if record else None,
            severity=Severity.MEDIUM,
            message=f"{len(strays)} punches from unregistered devices ({devices})",
            related_ids=tuple(e.event_id for e in strays),
        )

    @staticmethod
    def _stored_punches(record: Optional[AttendanceRecord]) -> list[PunchEvent]:
        """Times already on the record, as events, so new punches merge with them."""

        if record is None:
            return []
        punches: list[PunchEvent] = []
        for name, movement in (
            ("entry", MovementType.ENTRY),
            ("exit", MovementType.EXIT),
            ("entry2", MovementType.ENTRY),
            ("exit2", MovementType.EXIT),
        ):
            clock = getattr(record, name)
            if clock is not None:
                punches.append(
                    PunchEvent(
                        event_id=f"{record.record_id}/{name}",
                        employee_id=record.employee_id,
                        device_id=STORED_PUNCH_DEVICE,
                        timestamp=datetime.combine(record.work_date, clock),
                        movement=movement,
                    )
                )
        return punches

    def _candidate(
        self,
        existing: Optional[AttendanceRecord],
        match: MatchResult,
        placement: EmployeePlacement,
        *,
        employee_id: str,
        work_date: date,
        at: datetime,
        hold: bool = False,
    ) -> AttendanceRecord:
        classifier = self._factory.for_placement(placement)
        classification = classifier.classify(
            match.pairs,
            employee_id=employee_id,
            work_date=work_date,
            shift=self._shift,
            lunch_minutes=existing.lunch_minutes if existing else None,
            record_id=existing.record_id if existing else None,
        )
        fallback = existing.buckets if existing else HourBuckets()
        changes = dict(AttendanceRecord.pair_fields(match.pairs))
        changes["buckets"] = classification.buckets or fallback
        notes = append_note(existing.notes if existing else None, match.summary())
        if notes is not None:
            changes["notes"] = notes

        # Clean PENDING days complete on their own.
        resolved = (
            classification.is_complete and not classification.issues and match.pairs and not match.needs_review
        )
        if resolved and not hold and (existing is None or existing.status == AttendanceStatus.PENDING):
            changes["status"] = AttendanceStatus.COMPLETE

        if existing is None:
            return AttendanceRecord(
                record_id=self._new_id(),
                employee_id=employee_id,
                work_date=work_date,
                created_at=at,
                **changes,
            )
        return existing.with_changes(**changes)

    # ------------------------------------------------------------------
    # Review actions
    # ------------------------------------------------------------------
    def approve(
        self, record_id: str, *, actor: str, at: Optional[datetime] = None, notes: Optional[str] = None
    ) -> AttendanceRecord:
        record = self._get(record_id)
        updated = lifecycle.approve(record, actor=actor, at=at or now_local(), notes=notes)
        return self._save(record, updated)

    def reject(self, record_id: str, *, actor: str, reason: str, at: Optional[datetime] = None) -> AttendanceRecord:
        record = self._get(record_id)
        updated = lifecycle.reject(record, actor=actor, reason=reason, at=at or now_local())
        return self._save(record, updated)

    def send_to_review(self, record_id: str, *, actor: str, at: Optional[datetime] = None) -> AttendanceRecord:
        record = self._get(record_id)
        return self._save(record, lifecycle.send_to_review(record, actor=actor, at=at or now_local()))

    def override(
        self,
        record_id: str,
        target: AttendanceStatus,
        *,
        actor: str,
        reason: str,
        at: Optional[datetime] = None,
    ) -> AttendanceRecord:
        record = self._get(record_id)
        updated = lifecycle.override(record, target, actor=actor, reason=reason, at=at or now_local())
        self._log.info("Override of %s: %s -> %s by %s", record_id, record.status.value, target.value, actor)
        return self._save(record, updated)

    def correct(
        self,
        record_id: str,
        pairs: Sequence[WorkPair],
        *,
        actor: str,
        reason: str,
        lunch_minutes: Optional[int] = None,
        at: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Manual correction of the punch times; hours are re-classified."""

        require_non_empty(actor, "actor")
        require_non_empty(reason, "reason")
        record = self._get(record_id)
        if not lifecycle.can_transition(record.status, AttendanceStatus.MODIFIED):
            raise InvalidTransitionError(f"{record.status.value} records cannot be corrected")

        placement = self._master.resolve_employee(record.employee_id)
        classification = self._factory.for_placement(placement).classify(
            pairs,
            employee_id=record.employee_id,
            work_date=record.work_date,
            shift=self._shift,
            lunch_minutes=lunch_minutes if lunch_minutes is not None else record.lunch_minutes,
            record_id=record.record_id,
        )
        if not classification.is_classified:
            raise ValidationError("; ".join(i.message for i in classification.issues))

        corrected = record.with_changes(
            **AttendanceRecord.pair_fields(tuple(pairs)),
            lunch_minutes=lunch_minutes if lunch_minutes is not None else record.lunch_minutes,
            buckets=classification.buckets,
            is_manual=True,
        )
        corrected = lifecycle.transition(
            corrected, AttendanceStatus.MODIFIED, actor=actor, at=at or now_local(), notes=reason.strip()
        )
        return self._save(record, corrected)

    def record_manual(
        self,
        employee_id: str,
        work_date: date,
        pairs: Sequence[WorkPair],
        *,
        actor: str,
        reason: str,
        lunch_minutes: Optional[int] = None,
        at: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Manual entry for a day that has no record yet (device down, field work)."""

        require_non_empty(employee_id, "employee_id")
        require_non_empty(actor, "actor")
        require_non_empty(reason, "reason")
        pairs = tuple(pairs)
        if not pairs:
            raise ValidationError("A manual entry needs at least one entry/exit pair")

        placement = self._master.resolve_employee(employee_id)
        if placement is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        live = [r for r in self._records.get_for_employee_and_date(employee_id, work_date) if not r.is_deleted]
        if live:
            raise ValidationError(
                f"{employee_id} already has record {live[0].record_id} on {work_date}; correct it instead"
            )

        classification = self._factory.for_placement(placement).classify(
            pairs,
            employee_id=employee_id,
            work_date=work_date,
            shift=self._shift,
            lunch_minutes=lunch_minutes,
        )
        if not classification.is_complete:
            raise ValidationError("; ".join(i.message for i in classification.issues))

        at = at or now_local()
        record = AttendanceRecord(
            record_id=self._new_id(),
            employee_id=employee_id,
            work_date=work_date,
            **AttendanceRecord.pair_fields(pairs),
            lunch_minutes=lunch_minutes,
            buckets=classification.buckets,
            status=AttendanceStatus.MODIFIED,
            is_manual=True,
            notes=reason.strip(),
            modified_by=actor,
            modified_at=at,
            created_at=at,
        )
        saved = self._records.create(record)
        self._log.info("Manual record %s for %s on %s by %s", saved.record_id, employee_id, work_date, actor)
        return saved

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------
    def process_absences(
        self, work_date: date, employee_ids: Iterable[str], *, at: Optional[datetime] = None
    ) -> list[BatchItemOutcome]:
        """Create ABSENT records for employees with nothing recorded on a working day."""

        if self._shift.is_rest_day(work_date):
            self._log.info("Skipping absences on rest day %s", work_date)
            return []
        at = at or now_local()
        outcomes: list[BatchItemOutcome] = []
        for employee_id in dict.fromkeys(employee_ids):
            try:
                live = [r for r in self._records.get_for_employee_and_date(employee_id, work_date) if not r.is_deleted]
                if live:
                    outcomes.append(BatchItemOutcome(record_id=live[0].record_id, ok=True, skipped=True))
                    continue
                absent = AttendanceRecord(
                    record_id=self._new_id(),
                    employee_id=employee_id,
                    work_date=work_date,
                    status=AttendanceStatus.ABSENT,
                    created_at=at,
                )
                saved = self._records.create(absent)
                outcomes.append(BatchItemOutcome(record_id=saved.record_id, ok=True))
            except StoreError as exc:
                self._log.error("Could not record absence of %s on %s: %s", employee_id, work_date, exc)
                outcomes.append(BatchItemOutcome(record_id=employee_id, ok=False, error=str(exc)))
        return outcomes

    def repair_batch(
        self,
        records: Iterable[AttendanceRecord],
        *,
        actor: Optional[str] = None,
        at: Optional[datetime] = None,
        committed: Optional[set[str]] = None,
    ) -> list[BatchItemOutcome]:
        """Check and repair records chunk by chunk.

        `committed` collects the ids written in this run; records already in it
        are skipped, so re-running a partly failed batch does not write twice.
        """

        at = at or now_local()
        committed = committed if committed is not None else set()
        items = sorted((r for r in records if not r.is_deleted), key=lambda r: r.record_id)
        issues_by_id = self._checker.check_all(items, employee_exists=self._employee_exists())

        outcomes: list[BatchItemOutcome] = []
        for index, chunk in enumerate(chunked(items, self._chunk_size), start=1):
            for record in chunk:
                if record.record_id in committed:
                    outcomes.append(BatchItemOutcome(record_id=record.record_id, ok=True, skipped=True))
                    continue
                result = self._repair.repair(record, issues_by_id.get(record.record_id, ()), actor=actor, at=at)
                if not result.changed:
                    outcomes.append(BatchItemOutcome(record_id=record.record_id, ok=True))
                    continue
                try:
                    self._persist_repair(record, result.record)
                except (VersionConflict, StoreError) as exc:
                    self._log.warning("Repair of %s not saved: %s", record.record_id, exc)
                    outcomes.append(
                        BatchItemOutcome(record_id=record.record_id, ok=False, actions=result.actions, error=str(exc))
                    )
                    continue
                committed.add(record.record_id)
                outcomes.append(BatchItemOutcome(record_id=record.record_id, ok=True, actions=result.actions))
            self._log.debug("Repair chunk %d done (%d records)", index, len(chunk))

        failed = sum(1 for o in outcomes if not o.ok)
        self._log.info("Repair batch: %d records, %d committed, %d failed", len(items), len(committed), failed)
        return outcomes

    def repair_branch_day(
        self,
        branch_id: str,
        work_date: date,
        *,
        actor: Optional[str] = None,
        at: Optional[datetime] = None,
        page_size: int = DEFAULT_PAGE_LIMIT,
    ) -> list[BatchItemOutcome]:
        """Repair every record of a branch on one day, reading the store page by page."""

        require_non_empty(branch_id, "branch_id")
        require_positive(page_size, "page_size")
        records: list[AttendanceRecord] = []
        offset = 0
        while True:
            page = list(self._records.get_for_branch_and_date(branch_id, work_date, offset=offset, limit=page_size))
            records.extend(page)
            if len(page) < page_size:
                break
            offset += page_size
        self._log.info("Repairing %d records of branch %s on %s", len(records), branch_id, work_date)
        return self.repair_batch(records, actor=actor, at=at)

    def _persist_repair(self, original: AttendanceRecord, repaired: AttendanceRecord) -> AttendanceRecord:
        if repaired.is_deleted and not original.is_deleted:
            return self._records.soft_delete(
                original.record_id, expected_version=original.version, at=repaired.deleted_at
            )
        return self._commit(original, RecordPatch.between(original, repaired))

    def aggregate(
        self,
        records: Sequence[AttendanceRecord],
        *,
        group_by: GroupBy = GroupBy.EMPLOYEE,
        window: Window = Window.MONTH,
        placements: Optional[Mapping[str, EmployeePlacement]] = None,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> AggregationRun:
        """Fold records chunk by chunk; cancellation is honoured between chunks."""

        records = list(records)
        if group_by != GroupBy.EMPLOYEE and placements is None:
            placements = self._placements({r.employee_id for r in records})

        fold: Fold = {}
        processed = 0
        for chunk in chunked(records, self._chunk_size):
            if should_cancel is not None and should_cancel():
                self._log.info("Aggregation cancelled after %d chunks", processed)
                return AggregationRun(partials=fold, cancelled=True, chunks_processed=processed)
            fold = merge_folds(
                fold, self._aggregator.fold(chunk, group_by=group_by, window=window, placements=placements)
            )
            processed += 1
        return AggregationRun(partials=fold, cancelled=False, chunks_processed=processed)

    def summarize(self, run: AggregationRun):
        return self._aggregator.summaries(run.partials)

    def trend(self, run: AggregationRun):
        return self._aggregator.trend(run.partials)

    def validate_range(self, employee_id: str, start: date, end: date) -> ValidationReport:
        if end < start:
            raise ValidationError("end must not be before start")
        records = list(self._records.get_for_employee_range(employee_id, start, end))
        by_id = self._checker.check_all(records, employee_exists=self._employee_exists())
        issues = tuple(issue for record_id in sorted(by_id) for issue in by_id[record_id])
        return ValidationReport(records_checked=len(by_id), issues=issues)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _employee_exists(self) -> Callable[[str], bool]:
        return lambda employee_id: self._master.resolve_employee(employee_id) is not None

    def _placements(self, employee_ids: Iterable[str]) -> dict[str, EmployeePlacement]:
        found: dict[str, EmployeePlacement] = {}
        for employee_id in sorted(employee_ids):
            placement = self._master.resolve_employee(employee_id)
            if placement is not None:
                found[employee_id] = placement
        return found

    def _get(self, record_id: str) -> AttendanceRecord:
        record = self._records.get_by_id(record_id)
        if record is None or record.is_deleted:
            raise NotFoundError(f"Attendance record {record_id} not found")
        return record

    def _save(self, original: AttendanceRecord, updated: AttendanceRecord) -> AttendanceRecord:
        patch = RecordPatch.between(original, updated)
        if not patch:
            return original
        return self._commit(original, patch)

    def _commit(self, original: AttendanceRecord, patch: RecordPatch) -> AttendanceRecord:
        try:
            return self._records.update(original.record_id, patch, expected_version=original.version)
        except VersionConflict:
            self._log.warning("Version conflict on %s (expected %d)", original.record_id, original.version)
            raise
