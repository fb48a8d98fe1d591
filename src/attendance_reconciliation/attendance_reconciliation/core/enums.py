from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Lifecycle state of a daily attendance record."""

    PENDING = "PENDING"
    COMPLETE = "COMPLETE"
    MODIFIED = "MODIFIED"
    INCONSISTENT = "INCONSISTENT"
    UNDER_REVIEW = "UNDER_REVIEW"
    ABSENT = "ABSENT"


class MovementType(str, Enum):
    """Direction of a punch as reported (or not) by the device."""

    ENTRY = "ENTRY"
    EXIT = "EXIT"
    UNKNOWN = "UNKNOWN"


class EmployeeType(str, Enum):
    REGULAR = "REGULAR"
    ADMINISTRATIVE = "ADMINISTRATIVE"


class IssueKind(str, Enum):
    """Data-quality findings, in the order the checker evaluates them."""

    INCOMPLETE_PAIR = "INCOMPLETE_PAIR"
    MISSING_ENTRY = "MISSING_ENTRY"
    TIME_ORDER_VIOLATION = "TIME_ORDER_VIOLATION"
    NEGATIVE_HOURS = "NEGATIVE_HOURS"
    DUPLICATE = "DUPLICATE"
    ORPHANED_EMPLOYEE = "ORPHANED_EMPLOYEE"
    MANUAL_REVIEW = "MANUAL_REVIEW"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MatchNoteKind(str, Enum):
    """Heuristic decisions the event matcher surfaces instead of hiding."""

    INFERRED_MOVEMENT = "INFERRED_MOVEMENT"
    UNPAIRED_ENTRY = "UNPAIRED_ENTRY"
    UNPAIRED_EXIT = "UNPAIRED_EXIT"
    OVERFLOW = "OVERFLOW"


class RepairAction(str, Enum):
    MARK_INCONSISTENT = "MARK_INCONSISTENT"
    MARK_UNDER_REVIEW = "MARK_UNDER_REVIEW"
    CLAMP_NEGATIVE_HOURS = "CLAMP_NEGATIVE_HOURS"
    SOFT_DELETE = "SOFT_DELETE"


class GroupBy(str, Enum):
    EMPLOYEE = "employee"
    AREA = "area"
    BRANCH = "branch"


class Window(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
