import pytest

from src.attendance_reconciliation.attendance_reconciliation.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def test_shift_endpoint_exposes_configuration(client):
    resp = client.get("/api/shift")

    assert resp.status_code == 200
    assert resp.get_json()["version"] == "test"
    assert resp.get_json()["tier1_threshold_minutes"] == 120


def test_classify_endpoint(client):
    resp = client.post(
        "/api/classify",
        json={
            "employee_id": "E1",
            "work_date": "2024-03-04",
            "pairs": [{"entry": "08:00", "exit": "18:00"}],
            "lunch_minutes": 60,
            "hourly_rate": "10",
        },
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["buckets"]["regular"] == 8.0
    assert body["buckets"]["recargo25"] == 1.0
    assert body["premiums"]["recargo25"] == "12.50"


def test_classify_reports_time_order_violation(client):
    resp = client.post(
        "/api/classify",
        json={"employee_id": "E1", "work_date": "2024-03-04", "pairs": [{"entry": "08:00", "exit": "07:00"}]},
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is False
    assert body["buckets"] is None
    assert body["issues"][0]["kind"] == "TIME_ORDER_VIOLATION"


def test_match_endpoint(client):
    resp = client.post(
        "/api/match",
        json={
            "employee_id": "E1",
            "work_date": "2024-03-04",
            "events": [
                {"event_id": "a", "employee_id": "E1", "device_id": "D1", "timestamp": "2024-03-04T08:00:00", "movement": "ENTRY"},
                {"event_id": "b", "employee_id": "E1", "device_id": "D1", "timestamp": "2024-03-04T08:03:00", "movement": "ENTRY"},
                {"event_id": "c", "employee_id": "E1", "device_id": "D1", "timestamp": "2024-03-04T17:00:00"},
            ],
        },
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["duplicates"] == ["b"]
    assert body["pairs"] == [{"entry": "08:00", "exit": "17:00"}]


def test_check_and_repair_endpoints(client):
    records = [
        {"record_id": "R1", "employee_id": "E1", "work_date": "2024-03-04", "entry": "08:10", "status": "COMPLETE"},
        {"record_id": "R2", "employee_id": "E9", "work_date": "2024-03-04", "entry": "08:00", "exit": "17:00"},
    ]

    checked = client.post("/api/check", json={"records": records, "unknown_employees": ["E9"]}).get_json()
    assert checked["is_consistent"] is False
    assert [i["kind"] for i in checked["issues"]["R1"]] == ["INCOMPLETE_PAIR"]
    assert [i["kind"] for i in checked["issues"]["R2"]] == ["ORPHANED_EMPLOYEE"]

    repaired = client.post("/api/repair", json={"records": records, "unknown_employees": ["E9"]}).get_json()
    by_id = {r["record"]["record_id"]: r for r in repaired["results"]}
    assert by_id["R1"]["record"]["status"] == "INCONSISTENT"
    assert by_id["R1"]["actions"] == ["MARK_INCONSISTENT"]
    assert by_id["R2"]["record"]["deleted_at"] is not None


def test_aggregate_endpoint(client):
    records = [
        {"record_id": f"R{i}", "employee_id": "E1", "work_date": f"2024-03-0{4 + i}", "entry": "08:00", "exit": "17:00",
         "status": "COMPLETE", "buckets": {"regular": 8.0}}
        for i in range(3)
    ] + [{"record_id": "A1", "employee_id": "E1", "work_date": "2024-03-07", "status": "ABSENT"}]

    body = client.post("/api/aggregate", json={"records": records, "window": "week"}).get_json()

    [summary] = body["summaries"]
    assert summary["label"] == "2024-W10"
    assert summary["total_hours"] == 24.0
    assert summary["attendance_rate"] == 75.0
    [series] = body["trend"]
    assert series["group_id"] == "E1"
    assert [p["label"] for p in series["points"]] == ["2024-W10"]


def test_aggregate_keeps_unresolved_group_as_null(client):
    records = [
        {"record_id": "R1", "employee_id": "E1", "work_date": "2024-03-04", "entry": "08:00", "exit": "17:00",
         "status": "COMPLETE", "buckets": {"regular": 8.0}},
        {"record_id": "R2", "employee_id": "E9", "work_date": "2024-03-04", "entry": "08:00", "exit": "17:00",
         "status": "COMPLETE", "buckets": {"regular": 8.0}},
    ]

    body = client.post(
        "/api/aggregate",
        json={"records": records, "group_by": "branch", "placements": {"E1": {"branch_id": "B1"}}},
    ).get_json()

    assert [s["group_id"] for s in body["summaries"]] == ["B1", None]
    assert [t["group_id"] for t in body["trend"]] == ["B1", None]


@pytest.mark.parametrize(
    "payload",
    [
        {"employee_id": "E1", "work_date": "04/03/2024", "pairs": []},
        {"employee_id": "E1", "work_date": "2024-03-04", "pairs": [{"entry": "8am"}]},
        {"employee_id": "E1", "work_date": "2024-03-04", "employee_type": "INTERN"},
        {"employee_id": "E1", "work_date": "2024-03-04", "pairs": [], "lunch_minutes": "abc"},
    ],
)
def test_invalid_input_is_a_400(client, payload):
    resp = client.post("/api/classify", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_non_json_body_is_a_400(client):
    resp = client.post("/api/match", data="nope", content_type="text/plain")
    assert resp.status_code == 400


def test_malformed_numbers_in_records_and_events_are_a_400(client):
    record = {"record_id": "R1", "employee_id": "E1", "work_date": "2024-03-04", "version": "x"}
    event = {"event_id": "a", "employee_id": "E1", "device_id": "D1", "timestamp": "2024-03-04T08:00:00",
             "confidence": "high"}

    checked = client.post("/api/check", json={"records": [record]})
    matched = client.post("/api/match", json={"employee_id": "E1", "work_date": "2024-03-04", "events": [event]})

    assert checked.status_code == 400
    assert checked.get_json()["message"] == "version: expected a number"
    assert matched.status_code == 400
    assert matched.get_json()["message"] == "confidence: expected a number"
