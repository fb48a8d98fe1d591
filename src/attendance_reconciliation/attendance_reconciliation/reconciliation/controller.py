from __future__ import annotations

from decimal import Decimal, InvalidOperation

from flask import Flask, jsonify, request

from ..attendance.model import EmployeePlacement
from ..core.exceptions import DomainError, NotFoundError, ValidationError, VersionConflict
from ..container import Container
from . import serializers


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _list(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be a list")
    return value


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "error": type(e).__name__, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"success": False, "error": "NotFoundError", "message": str(e)}), 404

    @app.errorhandler(VersionConflict)
    def handle_conflict(e: VersionConflict):
        return jsonify({"success": False, "error": "VersionConflict", "message": str(e)}), 409

    @app.route("/api/shift", methods=["GET"], endpoint="api_shift")
    def api_shift():
        shift = container.shift
        return jsonify(
            {
                "version": shift.version,
                "standard_shift_minutes": shift.standard_shift_minutes,
                "tier1_threshold_minutes": shift.tier1_threshold_minutes,
                "tier2_threshold_minutes": shift.tier2_threshold_minutes,
                "night_start": shift.night_start.strftime("%H:%M"),
                "night_end": shift.night_end.strftime("%H:%M"),
                "shift_start": shift.shift_start.strftime("%H:%M"),
                "shift_end": shift.shift_end.strftime("%H:%M"),
                "grace_minutes": shift.grace_minutes,
                "lunch_minutes": shift.lunch.minutes,
            }
        )

    @app.route("/api/classify", methods=["POST"], endpoint="api_classify")
    def api_classify():
        data = _json_body()
        employee_id = str(data.get("employee_id") or "")
        employee_type = serializers.parse_employee_type(data.get("employee_type"))
        placement = EmployeePlacement(employee_id=employee_id, employee_type=employee_type)
        classifier = container.classifier_factory.for_placement(placement)
        result = classifier.classify(
            serializers.parse_pairs(data.get("pairs")),
            employee_id=employee_id,
            work_date=serializers.parse_date(data.get("work_date"), "work_date"),
            shift=container.shift,
            lunch_minutes=serializers.parse_int(data.get("lunch_minutes"), "lunch_minutes"),
        )

        body = {
            "success": result.is_classified,
            "buckets": result.buckets.as_dict() if result.buckets else None,
            "issues": [i.as_dict() for i in result.issues],
        }
        if result.buckets is not None and data.get("hourly_rate") is not None:
            try:
                rate = Decimal(str(data["hourly_rate"]))
            except InvalidOperation as exc:
                raise ValidationError("hourly_rate must be a number") from exc
            premiums = container.premium_calculator.breakdown(result.buckets, rate)
            body["premiums"] = {
                "regular": str(premiums.regular),
                "recargo25": str(premiums.recargo25),
                "suplementario50": str(premiums.suplementario50),
                "extraordinario100": str(premiums.extraordinario100),
                "nocturnas": str(premiums.nocturnas),
                "total": str(premiums.total),
            }
        return jsonify(body)

    @app.route("/api/match", methods=["POST"], endpoint="api_match")
    def api_match():
        data = _json_body()
        events = [serializers.parse_event(e) for e in _list(data, "events")]
        match = container.matcher.match(
            events,
            employee_id=str(data.get("employee_id") or ""),
            work_date=serializers.parse_date(data.get("work_date"), "work_date"),
        )
        body = serializers.match_to_dict(match)
        body["issues"] = [i.as_dict() for i in container.checker.check_match(match)]
        return jsonify(body)

    @app.route("/api/check", methods=["POST"], endpoint="api_check")
    def api_check():
        data = _json_body()
        records = [serializers.parse_record(r) for r in _list(data, "records")]
        unknown = {str(e) for e in _list(data, "unknown_employees")}
        found = container.checker.check_all(records, employee_exists=lambda employee_id: employee_id not in unknown)
        return jsonify(
            {
                "is_consistent": not any(found.values()),
                "issues": {rid: [i.as_dict() for i in issues] for rid, issues in found.items()},
            }
        )

    @app.route("/api/repair", methods=["POST"], endpoint="api_repair")
    def api_repair():
        data = _json_body()
        records = [serializers.parse_record(r) for r in _list(data, "records")]
        unknown = {str(e) for e in _list(data, "unknown_employees")}
        actor = data.get("actor")
        found = container.checker.check_all(records, employee_exists=lambda employee_id: employee_id not in unknown)

        results = []
        for record in records:
            repaired = container.repair_engine.repair(record, found.get(record.record_id, ()), actor=actor)
            results.append(
                {
                    "record": serializers.record_to_dict(repaired.record),
                    "actions": [a.value for a in repaired.actions],
                }
            )
        return jsonify({"results": results})

    @app.route("/api/aggregate", methods=["POST"], endpoint="api_aggregate")
    def api_aggregate():
        data = _json_body()
        records = [serializers.parse_record(r) for r in _list(data, "records")]
        fold = container.aggregator.fold(
            records,
            group_by=serializers.parse_group_by(data.get("group_by")),
            window=serializers.parse_window(data.get("window")),
            placements=serializers.parse_placements(data.get("placements")),
        )
        trend = container.aggregator.trend(fold)
        return jsonify(
            {
                "summaries": [s.as_dict() for s in container.aggregator.summaries(fold)],
                # A list, not an object: the unresolved group has a null id.
                "trend": [
                    {
                        "group_id": group_id,
                        "points": [
                            {
                                "label": p.label,
                                "total_hours": p.total_hours,
                                "overtime_hours": p.overtime_hours,
                                "days_worked": p.days_worked,
                                "attendance_rate": p.attendance_rate,
                            }
                            for p in points
                        ],
                    }
                    for group_id, points in trend.items()
                ],
            }
        )
