from __future__ import annotations

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from tests.fakes import new_id


def _signup(client, email="a@x.com", secret="p1"):
    return client.post("/api/identity/signup", json={"email": email, "secret": secret})


def _auth(token):
    return {"User-Id": token}


def test_scenario_signup_login_create_and_isolated_list(client):
    res = _signup(client)
    assert res.status_code == 200
    t1 = res.get_json()["token"]

    res = client.post("/api/identity/login", json={"email": "a@x.com", "secret": "p1"})
    assert res.get_json() == {"success": True, "token": t1}

    res = client.post(
        "/api/students",
        json={"name": "Jon", "admissionNo": "AMS001", "class": "Nine", "attendancePercentage": 90},
        headers=_auth(t1),
    )
    assert res.status_code == 200
    created = res.get_json()
    assert created["userId"] == t1
    assert created["attendancePercentage"] == 90.0

    assert client.get("/api/students", headers=_auth(t1)).get_json() == [created]

    t2 = _signup(client, email="b@x.com", secret="p2").get_json()["token"]
    assert client.get("/api/students", headers=_auth(t2)).get_json() == []


def test_signup_conflict_and_login_failure(client):
    _signup(client)

    res = _signup(client, secret="different")
    assert res.status_code == 400
    assert res.get_json()["success"] is False

    res = client.post("/api/identity/login", json={"email": "a@x.com", "secret": "wrong"})
    assert res.status_code == 401
    assert res.get_json() == {"success": False, "message": "Invalid email or secret"}


@pytest.mark.parametrize("headers", [{}, {"User-Id": ""}, {"User-Id": "not-an-object-id"}])
@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/classes"),
        ("get", "/api/teachers"),
        ("get", "/api/students"),
        ("get", "/api/attendance"),
        ("post", "/api/classes"),
        ("delete", "/api/students/000000000000000000000000"),
        ("get", "/api/dashboard/summary"),
    ],
)
def test_missing_or_malformed_token_is_unauthorized(client, headers, method, path):
    res = getattr(client, method)(path, headers=headers)

    assert res.status_code == 401
    assert res.get_json()["success"] is False


def test_token_in_body_is_ignored(client):
    token = _signup(client).get_json()["token"]

    res = client.post("/api/classes", json={"name": "Nine", "subject": "Maths", "userId": token})

    assert res.status_code == 401


def test_create_validation_errors_are_400(client):
    token = _signup(client).get_json()["token"]

    assert client.post("/api/classes", json={"name": "Nine"}, headers=_auth(token)).status_code == 400
    assert client.post("/api/teachers", data="not json", headers=_auth(token)).status_code == 400
    res = client.post(
        "/api/students",
        json={"name": "Jon", "admissionNo": "AMS001", "class": "Nine", "attendancePercentage": "abc"},
        headers=_auth(token),
    )
    assert res.status_code == 400


def test_oversized_percentage_is_400_not_500(client):
    token = _signup(client).get_json()["token"]

    res = client.post(
        "/api/students",
        json={"name": "Jon", "admissionNo": "AMS001", "class": "Nine", "attendancePercentage": 10**400},
        headers=_auth(token),
    )

    assert res.status_code == 400
    assert res.get_json()["success"] is False
    assert client.get("/api/students", headers=_auth(token)).get_json() == []


def test_delete_flow_and_non_owner(client):
    owner = _signup(client).get_json()["token"]
    other = _signup(client, email="b@x.com").get_json()["token"]
    cls = client.post("/api/classes", json={"name": "Nine", "subject": "Maths"}, headers=_auth(owner)).get_json()

    res = client.delete(f"/api/classes/{cls['_id']}", headers=_auth(other))
    assert res.status_code == 404
    assert res.get_json()["message"] == "Class not found or unauthorized"

    res = client.delete(f"/api/classes/{cls['_id']}", headers=_auth(owner))
    assert res.get_json() == {"success": True}
    assert client.get("/api/classes", headers=_auth(owner)).get_json() == []


def test_attendance_is_listed_with_student_and_has_no_delete_route(client):
    token = _signup(client).get_json()["token"]
    student = client.post(
        "/api/students", json={"name": "Jon", "admissionNo": "AMS001", "class": "Nine"}, headers=_auth(token)
    ).get_json()

    res = client.post("/api/attendance", json={"studentId": student["_id"], "status": "Absent"}, headers=_auth(token))
    assert res.status_code == 200
    mark = res.get_json()

    rows = client.get("/api/attendance", headers=_auth(token)).get_json()
    assert len(rows) == 1
    assert rows[0]["student"] == student
    assert rows[0]["status"] == "Absent"
    assert rows[0]["date"] == mark["date"]

    assert client.delete(f"/api/attendance/{mark['_id']}", headers=_auth(token)).status_code == 404


def test_next_admission_no_and_dashboard_summary(client):
    token = _signup(client).get_json()["token"]
    assert client.get("/api/students/next-admission-no", headers=_auth(token)).get_json() == {"admissionNo": "AMS001"}

    client.post("/api/students", json={"name": "Jon", "admissionNo": "AMS001", "class": "Nine"}, headers=_auth(token))
    client.post("/api/teachers", json={"name": "Mrs. Rao", "subject": "Maths"}, headers=_auth(token))

    assert client.get("/api/students/next-admission-no", headers=_auth(token)).get_json() == {"admissionNo": "AMS002"}
    assert client.get("/api/dashboard/summary", headers=_auth(token)).get_json() == {
        "classes": 0,
        "teachers": 1,
        "students": 1,
        "attendance": 0,
    }


def test_storage_failure_is_generic_500(client, container, monkeypatch):
    def boom(owner_id):
        raise ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(container.classes_repo, "list_for_owner", boom)

    res = client.get("/api/classes", headers=_auth(new_id()))

    assert res.status_code == 500
    assert res.get_json() == {"success": False, "message": "Internal server error"}


def test_unknown_route_is_json_404(client):
    res = client.get("/api/nothing-here")

    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_health_without_database(client):
    assert client.get("/health").get_json() == {"status": "ok", "database": "not configured"}


def test_cors_preflight_allows_identity_header(client):
    res = client.options(
        "/api/classes",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "User-Id",
        },
    )

    assert res.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"
    assert "user-id" in res.headers.get("Access-Control-Allow-Headers", "").lower()
