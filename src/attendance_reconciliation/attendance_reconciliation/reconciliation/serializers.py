from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceRecord, EmployeePlacement, HourBuckets
from ..common.datetime_utils import format_clock, parse_clock, parse_iso_date
from ..core.enums import AttendanceStatus, EmployeeType, GroupBy, MovementType, Window
from ..core.exceptions import ValidationError
from ..events.model import MatchResult, PunchEvent
from ..shifts.interval import WorkPair


def _clock(value: Any, field_name: str):
    if value in (None, ""):
        return None
    try:
        return parse_clock(str(value))
    except ValueError as exc:
        raise ValidationError(f"{field_name}: invalid clock time {value!r}") from exc


def parse_date(value: Any, field_name: str):
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value))
    except ValueError as exc:
        raise ValidationError(f"{field_name}: invalid date {value!r}") from exc


def _datetime(value: Any, field_name: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationError(f"{field_name}: invalid timestamp {value!r}") from exc


def _enum(enum_cls, value: Any, field_name: str, default=None):
    if value in (None, ""):
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    try:
        return enum_cls(str(value))
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name}: expected one of {allowed}") from exc


def parse_int(value: Any, field_name: str, default: Optional[int] = None) -> Optional[int]:
    if value in (None, ""):
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{field_name}: expected a number")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name}: expected a number") from exc


def _float(value: Any, field_name: str, default: float) -> float:
    if value in (None, ""):
        return default
    if isinstance(value, bool):
        raise ValidationError(f"{field_name}: expected a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name}: expected a number") from exc


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError(f"{what} must be a JSON object")
    return data


def parse_pairs(items: Any) -> tuple[WorkPair, ...]:
    if items is None:
        return ()
    if not isinstance(items, list):
        raise ValidationError("pairs must be a list")
    return tuple(
        WorkPair(_clock(p.get("entry"), "entry"), _clock(p.get("exit"), "exit"))
        for p in (_mapping(item, "pair") for item in items)
    )


def parse_event(data: Any) -> PunchEvent:
    data = _mapping(data, "event")
    timestamp = _datetime(data.get("timestamp"), "timestamp")
    if timestamp is None:
        raise ValidationError("timestamp is required")
    return PunchEvent(
        event_id=str(data.get("event_id") or ""),
        employee_id=str(data.get("employee_id") or ""),
        device_id=str(data.get("device_id") or ""),
        timestamp=timestamp,
        movement=_enum(MovementType, data.get("movement"), "movement", MovementType.UNKNOWN),
        confidence=_float(data.get("confidence"), "confidence", 1.0),
    )


def parse_buckets(data: Any) -> HourBuckets:
    if data is None:
        return HourBuckets()
    data = _mapping(data, "buckets")
    try:
        return HourBuckets(**{name: float(data.get(name, 0.0)) for name in HourBuckets.NAMES})
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"buckets: {exc}") from exc


def parse_record(data: Any) -> AttendanceRecord:
    data = _mapping(data, "record")
    return AttendanceRecord(
        record_id=str(data.get("record_id") or ""),
        employee_id=str(data.get("employee_id") or ""),
        work_date=parse_date(data.get("work_date"), "work_date"),
        entry=_clock(data.get("entry"), "entry"),
        exit=_clock(data.get("exit"), "exit"),
        entry2=_clock(data.get("entry2"), "entry2"),
        exit2=_clock(data.get("exit2"), "exit2"),
        lunch_minutes=parse_int(data.get("lunch_minutes"), "lunch_minutes"),
        buckets=parse_buckets(data.get("buckets")),
        status=_enum(AttendanceStatus, data.get("status"), "status", AttendanceStatus.PENDING),
        is_manual=bool(data.get("is_manual", False)),
        notes=data.get("notes"),
        deleted_at=_datetime(data.get("deleted_at"), "deleted_at"),
        version=parse_int(data.get("version"), "version", 1),
        created_at=_datetime(data.get("created_at"), "created_at"),
    )


def parse_placements(data: Any) -> Optional[dict[str, EmployeePlacement]]:
    if data is None:
        return None
    placements: dict[str, EmployeePlacement] = {}
    for employee_id, raw in _mapping(data, "placements").items():
        p = _mapping(raw, "placement")
        placements[str(employee_id)] = EmployeePlacement(
            employee_id=str(employee_id),
            area_id=p.get("area_id"),
            branch_id=p.get("branch_id"),
            employee_type=_enum(EmployeeType, p.get("employee_type"), "employee_type", EmployeeType.REGULAR),
        )
    return placements


def parse_group_by(value: Any) -> GroupBy:
    return _enum(GroupBy, value, "group_by", GroupBy.EMPLOYEE)


def parse_window(value: Any) -> Window:
    return _enum(Window, value, "window", Window.MONTH)


def pair_to_dict(pair: WorkPair) -> dict:
    return {"entry": format_clock(pair.entry), "exit": format_clock(pair.exit)}


def record_to_dict(record: AttendanceRecord) -> dict:
    return {
        "record_id": record.record_id,
        "employee_id": record.employee_id,
        "work_date": record.work_date.isoformat(),
        "entry": format_clock(record.entry),
        "exit": format_clock(record.exit),
        "entry2": format_clock(record.entry2),
        "exit2": format_clock(record.exit2),
        "lunch_minutes": record.lunch_minutes,
        "buckets": record.buckets.as_dict(),
        "status": record.status.value,
        "is_manual": record.is_manual,
        "notes": record.notes,
        "deleted_at": record.deleted_at.isoformat() if record.deleted_at else None,
        "version": record.version,
    }


def match_to_dict(match: MatchResult) -> dict:
    return {
        "employee_id": match.employee_id,
        "work_date": match.work_date.isoformat(),
        "pairs": [pair_to_dict(p) for p in match.pairs],
        "duplicates": [e.event_id for e in match.duplicates],
        "overflow": [e.event_id for e in match.overflow],
        "notes": [{"kind": n.kind.value, "event_id": n.event_id, "message": n.message} for n in match.notes],
        "needs_review": match.needs_review,
    }


def parse_employee_type(value: Any) -> EmployeeType:
    return _enum(EmployeeType, value, "employee_type", EmployeeType.REGULAR)
