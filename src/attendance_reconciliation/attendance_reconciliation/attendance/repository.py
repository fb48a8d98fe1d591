from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.constants import DEFAULT_PAGE_LIMIT
from ..events.model import PunchEvent
from .model import AttendanceRecord, EmployeePlacement, RecordPatch


class RecordStore(Protocol):
    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Sequence[AttendanceRecord]:
        """Every live record of the employee on that day (duplicates included)."""

        raise NotImplementedError

    def get_for_employee_range(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_branch_and_date(
        self, branch_id: str, work_date: date, *, offset: int = 0, limit: int = DEFAULT_PAGE_LIMIT
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: str, patch: RecordPatch, *, expected_version: int) -> AttendanceRecord:
        """Apply `patch` when the stored version equals `expected_version`.

        Raises VersionConflict otherwise and StoreError on write failures.
        """

        raise NotImplementedError

    def soft_delete(self, record_id: str, *, expected_version: int, at: datetime) -> AttendanceRecord:
        raise NotImplementedError


class EventStore(Protocol):
    def get_unprocessed(self, employee_id: str, work_date: date) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def mark_processed(self, event_ids: Sequence[str], record_id: str) -> None:
        raise NotImplementedError


class MasterData(Protocol):
    def resolve_employee(self, employee_id: str) -> Optional[EmployeePlacement]:
        raise NotImplementedError

    def resolve_device(self, device_id: str) -> Optional[str]:
        """Branch id of the device, None when unknown."""

        raise NotImplementedError
