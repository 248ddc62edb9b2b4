from __future__ import annotations


def test_any_authenticated_user_lists_courses(client, student_headers):
    res = client.get("/api/courses", headers=student_headers)

    assert res.status_code == 200
    assert [c["name"] for c in res.get_json()] == ["Matemáticas", "Historia"]


def test_courses_require_token(client):
    assert client.get("/api/courses").status_code == 401


def test_admin_creates_course(client, admin_headers):
    res = client.post("/api/courses", json={"name": "Física"}, headers=admin_headers)

    assert res.status_code == 200
    assert res.get_json() == {"id": 3, "name": "Física"}


def test_blank_course_name_is_rejected(client, teacher_headers):
    res = client.post("/api/courses", json={"name": "  "}, headers=teacher_headers)

    assert res.status_code == 400


def test_student_cannot_create_course(client, student_headers):
    res = client.post("/api/courses", json={"name": "Arte"}, headers=student_headers)

    assert res.status_code == 403


def test_create_course_with_string_body_returns_400(client, admin_headers):
    res = client.post("/api/courses", json="Física", headers=admin_headers)

    assert res.status_code == 400
