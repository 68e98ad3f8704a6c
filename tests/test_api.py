# /tests/test_api.py

"""
End-to-end checks through FastAPI's TestClient. Every test gets its own app
wired to a fresh, empty memory repository (see conftest.py).
"""

import pytest

from app.core import messages


@pytest.fixture
def teacher(api_repo, teacher_payload):
    return api_repo.create_teacher(teacher_payload)


@pytest.fixture
def student(client, teacher):
    response = client.post(
        f"/api/teachers/{teacher.id}/students",
        json={"name": "S1", "age": 10, "level": "مبتدئ", "phone": ""},
    )
    assert response.status_code == 201
    return response.json()


def record_body(student_id, **overrides):
    body = {"studentId": student_id, "hijriDate": "1445/08/20", "day": "الأحد", "pageCount": 2, "behavior": "good"}
    body.update(overrides)
    return body

# --- Health and Auth ---

def test_health_check(client):
    """Tests that the health route answers."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "Halaqat Backend is running!"

def test_login_returns_teacher_without_password(client, teacher):
    """Tests that a successful login returns the teacher without the password."""
    response = client.post("/api/auth/login", json={"username": "t1", "password": "p1"})
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == teacher.id
    assert data["circleName"] == "C1"
    assert "password" not in data

def test_validate_route_matches_login(client, teacher):
    """Tests that the validate route accepts the same credentials as login."""
    response = client.post("/api/auth/validate", json={"username": "t1", "password": "p1"})
    assert response.status_code == 200
    assert response.json()["username"] == "t1"

@pytest.mark.parametrize("username, password", [("t1", "wrong"), ("nobody", "p1")])
def test_login_failure_is_generic(client, teacher, username, password):
    """Tests that every failed login gets the same 401 message."""
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 401
    assert response.json()["detail"] == messages.INVALID_CREDENTIALS

def test_login_with_missing_fields_is_400(client):
    """Tests that a login body missing fields is a 400."""
    response = client.post("/api/auth/login", json={"username": "t1"})
    assert response.status_code == 400
    assert response.json()["detail"] == messages.INVALID_DATA

def test_first_login_provisions_default_teachers(client, api_repo):
    """Tests that the first login on an empty store creates the default teachers."""
    assert api_repo.get_all_teachers() == []
    response = client.post("/api/auth/login", json={"username": "abdullah", "password": "123456"})
    assert response.status_code == 200
    assert len(api_repo.get_all_teachers()) == 2

def test_parent_login(client, api_repo, parent_payload):
    """Tests parent login success and failure."""
    api_repo.create_parent(parent_payload)
    ok = client.post("/api/auth/parent-login", json={"username": "parent1", "password": "secret"})
    assert ok.status_code == 200
    assert "password" not in ok.json()

    bad = client.post("/api/auth/parent-login", json={"username": "parent1", "password": "nope"})
    assert bad.status_code == 401

# --- Teachers and Parents ---

def test_list_teachers_strips_passwords(client, teacher):
    """Tests that the teacher listing carries no passwords."""
    response = client.get("/api/teachers")
    assert response.status_code == 200
    assert [t["username"] for t in response.json()] == ["t1"]
    assert all("password" not in t for t in response.json())

def test_list_parents_and_children(client, api_repo, teacher, parent_payload):
    """Tests the parent listing and a parent's children."""
    parent = api_repo.create_parent(parent_payload)
    client.post(f"/api/teachers/{teacher.id}/students", json={"name": "Child", "age": 8, "level": "beginner", "parentId": parent.id})

    parents = client.get("/api/parents").json()
    assert [p["id"] for p in parents] == [parent.id]
    assert "password" not in parents[0]

    children = client.get(f"/api/parents/{parent.id}/students").json()
    assert [c["name"] for c in children] == ["Child"]

# --- Students ---

def test_create_student_under_teacher(client, teacher, student):
    """Tests that a created student is listed under its teacher."""
    assert student["teacherId"] == teacher.id
    assert student["level"] == "beginner"
    assert student["phone"] is None
    assert student["id"] and student["createdAt"]

    listed = client.get(f"/api/teachers/{teacher.id}/students").json()
    assert [s["id"] for s in listed] == [student["id"]]
    assert [s["id"] for s in client.get("/api/students").json()] == [student["id"]]

def test_create_student_with_invalid_age_is_400(client, teacher):
    """Tests that a student with an invalid age is a 400."""
    response = client.post(f"/api/teachers/{teacher.id}/students", json={"name": "S", "age": 0, "level": "beginner"})
    assert response.status_code == 400
    assert response.json()["errors"]

def test_get_student(client, student):
    """Tests fetching a student by id."""
    assert client.get(f"/api/students/{student['id']}").json()["name"] == "S1"

    missing = client.get("/api/students/nonexistent-id")
    assert missing.status_code == 404
    assert missing.json()["detail"] == messages.STUDENT_NOT_FOUND

def test_update_student(client, student):
    """Tests a partial student update over HTTP."""
    response = client.put(f"/api/students/{student['id']}", json={"age": 11, "level": "متقدم"})
    assert response.status_code == 200
    data = response.json()
    assert data["age"] == 11
    assert data["level"] == "advanced"
    assert data["name"] == "S1"

def test_update_student_with_no_fields_is_400(client, student):
    """Tests that an update with no fields is a 400."""
    response = client.put(f"/api/students/{student['id']}", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == messages.NO_UPDATE_DATA

def test_update_student_with_null_name_is_400(client, student):
    """Tests that clearing a student's name is a 400."""
    response = client.put(f"/api/students/{student['id']}", json={"name": None})
    assert response.status_code == 400

def test_update_missing_student_is_404(client):
    """Tests that updating an unknown student is a 404."""
    response = client.put("/api/students/nonexistent-id", json={"name": "X"})
    assert response.status_code == 404
    assert client.get("/api/students/nonexistent-id").status_code == 404

def test_delete_student_removes_records_and_marks(client, api_repo, teacher, student):
    """Tests that deleting a student also removes its records and marks."""
    client.post(f"/api/teachers/{teacher.id}/records", json=record_body(student["id"]))
    client.post("/api/quran-errors", json={
        "studentId": student["id"], "surah": "البقرة", "verse": 8, "pageNumber": 2, "errorType": "repeated",
    })

    response = client.delete(f"/api/students/{student['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == messages.STUDENT_DELETED
    assert api_repo.get_daily_records_by_teacher(teacher.id) == []
    assert api_repo.get_quran_errors_by_student(student["id"]) == []

    again = client.delete(f"/api/students/{student['id']}")
    assert again.status_code == 404

# --- Daily Records ---

def test_record_lifecycle(client, teacher, student):
    """Tests creating, reading, updating and deleting a daily record over HTTP."""
    created = client.post(f"/api/teachers/{teacher.id}/records", json=record_body(student["id"], notes=""))
    assert created.status_code == 201
    record = created.json()
    assert record["teacherId"] == teacher.id
    assert record["notes"] is None

    assert client.get(f"/api/records/{record['id']}").json() == record

    updated = client.put(f"/api/records/{record['id']}", json={"pageCount": 5})
    assert updated.status_code == 200
    assert updated.json()["pageCount"] == 5
    assert updated.json()["behavior"] == "good"

    deleted = client.delete(f"/api/records/{record['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == messages.RECORD_DELETED
    assert client.get(f"/api/records/{record['id']}").status_code == 404

def test_records_are_listed_newest_first(client, teacher, student):
    """Tests that record listings over HTTP are newest first."""
    first = client.post("/api/records", json={**record_body(student["id"]), "teacherId": teacher.id}).json()
    second = client.post("/api/records", json={**record_body(student["id"]), "teacherId": teacher.id}).json()

    by_student = client.get(f"/api/students/{student['id']}/records").json()
    by_teacher = client.get(f"/api/teachers/{teacher.id}/records").json()
    assert [r["id"] for r in by_student] == [second["id"], first["id"]]
    assert [r["id"] for r in by_teacher] == [second["id"], first["id"]]

def test_create_record_without_teacher_is_400(client, student):
    """Tests that a record without a teacher is a 400."""
    response = client.post("/api/records", json=record_body(student["id"]))
    assert response.status_code == 400

def test_record_missing_ids_are_404(client):
    """Tests that unknown record ids are 404s."""
    assert client.put("/api/records/nonexistent-id", json={"notes": "x"}).status_code == 404
    assert client.delete("/api/records/nonexistent-id").status_code == 404

# --- Quran Errors ---

def test_quran_error_endpoints(client, student):
    """Tests creating, listing and deleting verse marks over HTTP."""
    body = {"studentId": student["id"], "surah": "البقرة", "verse": 8, "pageNumber": 2, "errorType": "repeated"}
    created = client.post("/api/quran-errors", json=body)
    assert created.status_code == 201

    listed = client.get(f"/api/students/{student['id']}/quran-errors").json()
    assert [e["id"] for e in listed] == [created.json()["id"]]

    deleted = client.delete(f"/api/quran-errors/{created.json()['id']}")
    assert deleted.status_code == 200
    assert client.get(f"/api/students/{student['id']}/quran-errors").json() == []
    assert client.delete(f"/api/quran-errors/{created.json()['id']}").status_code == 404

def test_toggle_and_clear_page(client, student):
    """Tests the toggle and clear-page routes."""
    body = {"studentId": student["id"], "surah": "البقرة", "verse": 8, "pageNumber": 2, "errorType": "repeated"}
    assert client.post("/api/quran-errors/toggle", json=body).json()["action"] == "added"
    assert client.post("/api/quran-errors/toggle", json=body).json()["action"] == "removed"

    for verse in (8, 9):
        client.post("/api/quran-errors/toggle", json={**body, "verse": verse})
    cleared = client.delete(f"/api/students/{student['id']}/quran-errors", params={"pageNumber": 2})
    assert cleared.status_code == 200
    assert cleared.json() == {"deleted": 2}

def test_invalid_quran_error_is_400(client, student):
    """Tests that an invalid verse mark is a 400."""
    response = client.post("/api/quran-errors", json={"studentId": student["id"], "surah": "البقرة", "verse": 0, "pageNumber": 2, "errorType": "repeated"})
    assert response.status_code == 400

# --- Summary and Reports ---

def test_summary_and_reports(client, teacher, student):
    """Tests the summary and report routes for a teacher and a student."""
    client.post(f"/api/teachers/{teacher.id}/records", json=record_body(student["id"], pageCount=4))

    summary = client.get(f"/api/teachers/{teacher.id}/summary").json()
    assert summary["studentCount"] == 1
    assert summary["recordCount"] == 1
    assert summary["levelCounts"] == {"beginner": 1}

    teacher_report = client.get(f"/api/teachers/{teacher.id}/report").json()
    assert teacher_report["rows"][0]["totalPages"] == 4

    student_report = client.get(f"/api/students/{student['id']}/report").json()
    assert student_report["behaviorPercentage"] == 100
    assert "password" not in str(student_report)

def test_report_export_is_csv(client, teacher, student):
    """Tests that the report export is served as CSV."""
    response = client.get(f"/api/teachers/{teacher.id}/report/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert response.text.splitlines()[0].startswith("Student Name,Level")

def test_reports_for_missing_ids_are_404(client):
    """Tests that reports for unknown ids are 404s."""
    assert client.get("/api/teachers/nobody/summary").status_code == 404
    assert client.get("/api/teachers/nobody/report").status_code == 404
    assert client.get("/api/teachers/nobody/report/export").status_code == 404
    assert client.get("/api/students/nobody/report").status_code == 404

def test_validate_route_does_not_provision_teachers(client, api_repo):
    """Tests that the session re-check on an empty store is refused and creates no accounts."""
    response = client.post("/api/auth/validate", json={"username": "abdullah", "password": "123456"})
    assert response.status_code == 401
    assert api_repo.get_all_teachers() == []
