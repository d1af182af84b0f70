# /tests/test_dashboard_api.py

from app.services.database_service import DatabaseService


def test_admin_sees_catalogue_counts(client, admin, classroom, subject, student, faculty):
    response = client.get("/dashboard/summary", headers=admin["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "Admin"
    assert body["counts"] == {"classroomCount": 1, "subjectCount": 1, "studentCount": 1, "facultyCount": 1}


def test_student_sees_enrolled_classrooms_only(client, admin, classroom, student):
    client.post("/classrooms", json={"name": "Room102", "capacity": 10}, headers=admin["headers"])
    client.post(
        f"/classrooms/{classroom['id']}/students",
        json={"studentIds": [student["account"]["id"]]},
        headers=admin["headers"],
    )

    body = client.get("/dashboard/summary", headers=student["headers"]).json()

    assert body["role"] == "Student"
    assert body["counts"] is None
    assert body["classrooms"] == [
        {"id": classroom["id"], "name": "Room101", "capacity": 30, "studentCount": 1}
    ]


def test_faculty_sees_teaching_assignments(client, admin, classroom, subject, faculty):
    client.post(
        f"/subjects/{subject['id']}/assign",
        json={"classroomId": classroom["id"], "facultyId": faculty["account"]["id"]},
        headers=admin["headers"],
    )

    body = client.get("/dashboard/summary", headers=faculty["headers"]).json()

    assert body["role"] == "Faculty"
    assert body["assignments"] == [
        {
            "subject": {"id": subject["id"], "name": "Data Structures", "code": "CS201"},
            "classroom": {"id": classroom["id"], "name": "Room101"},
        }
    ]


def test_dashboard_requires_login(client):
    response = client.get("/dashboard/summary")
    assert response.status_code == 401


def test_student_count_ignores_deleted_accounts(client, admin, classroom, student, register, payloads, session_factory):
    classmate = register(dict(payloads["Student"], username="student2", studentId="S-1002"))
    client.post(
        f"/classrooms/{classroom['id']}/students",
        json={"studentIds": [student["account"]["id"], classmate["account"]["id"]]},
        headers=admin["headers"],
    )
    session = session_factory()
    try:
        DatabaseService(session).delete_account(classmate["account"]["id"])
    finally:
        session.close()

    body = client.get("/dashboard/summary", headers=student["headers"]).json()

    assert body["classrooms"][0]["studentCount"] == 1
