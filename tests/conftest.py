from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.school_demo.school_demo.attendance.model import AttendanceRecord
from src.school_demo.school_demo.container import wire_container
from src.school_demo.school_demo.core.enums import Role
from src.school_demo.school_demo.core.exceptions import ConflictError, ValidationError
from src.school_demo.school_demo.courses.model import Course
from src.school_demo.school_demo.items.model import Item
from src.school_demo.school_demo.main import create_app
from src.school_demo.school_demo.students.model import Student
from src.school_demo.school_demo.users.model import User

# Cheap hashes keep the suite fast; verification works the same way.
FAST_HASH = "pbkdf2:sha256:1000"


class InMemoryItems:
    def __init__(self):
        self.rows: list[Item] = []

    def list_newest_first(self):
        return sorted(self.rows, key=lambda i: i.id, reverse=True)

    def create(self, text: str) -> Item:
        item = Item(id=len(self.rows) + 1, text=text)
        self.rows.append(item)
        return item


class InMemoryStudents:
    def __init__(self):
        self.rows: dict[int, Student] = {}

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.rows.get(student_id)

    def create(self, name: str) -> Student:
        student = Student(id=len(self.rows) + 1, name=name)
        self.rows[student.id] = student
        return student


class InMemoryCourses:
    def __init__(self):
        self.rows: dict[int, Course] = {}

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def create(self, name: str) -> Course:
        course = Course(id=len(self.rows) + 1, name=name)
        self.rows[course.id] = course
        return course


class InMemoryAttendance:
    """Mimics the unique (student, course, date) key and all-or-nothing batches."""

    def __init__(self, students: InMemoryStudents, courses: InMemoryCourses):
        self._students = students
        self._courses = courses
        self.rows: dict[tuple[int, int, date], AttendanceRecord] = {}
        self._next_id = 1
        self.clock = datetime(2026, 3, 2, 9, 0, 0)

    def upsert_batch(self, *, course_id, on_date, marks):
        if course_id not in self._courses.rows or any(m.student_id not in self._students.rows for m in marks):
            raise ValidationError("unknown student_id or course_id")

        for mark in marks:
            key = (mark.student_id, course_id, on_date)
            existing = self.rows.get(key)
            if existing:
                rec_id = existing.id
            else:
                rec_id = self._next_id
                self._next_id += 1
            self.rows[key] = AttendanceRecord(
                id=rec_id,
                student_id=mark.student_id,
                course_id=course_id,
                date=on_date,
                present=mark.present,
                recorded_at=self.clock,
            )
        return len(marks)

    def list_for_course(self, *, course_id, on_date):
        out = [
            AttendanceRecord(**{**vars(r), "student_name": self._students.rows[r.student_id].name})
            for r in self.rows.values()
            if r.course_id == course_id and r.date == on_date
        ]
        return sorted(out, key=lambda r: r.student_id)

    def list_for_student(self, *, student_id, on_date):
        out = [
            AttendanceRecord(**{**vars(r), "course_name": self._courses.rows[r.course_id].name})
            for r in self.rows.values()
            if r.student_id == student_id and r.date == on_date
        ]
        return sorted(out, key=lambda r: r.course_id)


class InMemoryUsers:
    def __init__(self, students: InMemoryStudents):
        self._students = students
        self.rows: dict[str, User] = {}

    def get_by_username(self, username: str) -> Optional[User]:
        return self.rows.get(username)

    def add(self, username: str, password: str, role: Role, student_id: Optional[int] = None) -> User:
        user = User(
            id=len(self.rows) + 1,
            username=username,
            password_hash=generate_password_hash(password, method=FAST_HASH),
            role=role,
            student_id=student_id,
        )
        self.rows[username] = user
        return user

    def create_user(self, *, username, password_hash, role, student_name=None) -> User:
        if username in self.rows:
            raise ConflictError("username exists")
        student_id = self._students.create(student_name).id if student_name is not None else None
        user = User(id=len(self.rows) + 1, username=username, password_hash=password_hash, role=role, student_id=student_id)
        self.rows[username] = user
        return user


class ScriptedCursor:
    """Records statements; raises ``error`` on the ``fail_at``-th statement starting with ``fail_on``."""

    def __init__(self, fail_on=None, error=None, fail_at=1):
        self._fail_on = fail_on
        self._error = error
        self._fail_at = fail_at
        self._matches = 0
        self.statements = []
        self.lastrowid = 0
        self.closed = False

    def execute(self, sql, params=None):
        sql = " ".join(sql.split())
        self.statements.append((sql, params))
        if self._fail_on and sql.startswith(self._fail_on):
            self._matches += 1
            if self._matches == self._fail_at:
                raise self._error
        self.lastrowid += 1

    def fetchone(self):
        return None

    def fetchall(self):
        return []

    def close(self):
        self.closed = True


class ScriptedConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class ScriptedConnectionFactory:
    def __init__(self, **cursor_kwargs):
        self.cursor = ScriptedCursor(**cursor_kwargs)
        self.connection = ScriptedConnection(self.cursor)

    def connect(self, *, with_database=True):
        return self.connection


@pytest.fixture
def fake_db():
    """Build a connection factory whose cursor fails as scripted."""
    return ScriptedConnectionFactory


@pytest.fixture
def repos():
    students = InMemoryStudents()
    courses = InMemoryCourses()
    for name in ("Alumno Demo 1", "Alumno Demo 2", "Alumno Demo 3"):
        students.create(name)
    for name in ("Matemáticas", "Historia"):
        courses.create(name)

    items = InMemoryItems()
    items.create("Bienvenidos a Kubernetes demo")

    users = InMemoryUsers(students)
    users.add("admin", "adminpass", Role.ADMIN)
    users.add("prof1", "teacherpass", Role.TEACHER)
    users.add("student1", "studentpass", Role.STUDENT, student_id=1)
    users.add("orphan", "orphanpass", Role.STUDENT)

    return {
        "items": items,
        "students": students,
        "courses": courses,
        "attendance": InMemoryAttendance(students, courses),
        "users": users,
    }


@pytest.fixture
def container(repos):
    return wire_container(
        items_repo=repos["items"],
        students_repo=repos["students"],
        courses_repo=repos["courses"],
        attendance_repo=repos["attendance"],
        users_repo=repos["users"],
        secret_key="test-secret",
    )


@pytest.fixture
def app(container):
    return create_app(settings_module="config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    """Log in through the API and return an Authorization header for that user."""

    def _login(username: str, password: str) -> dict:
        res = client.post("/api/auth/login", json={"username": username, "password": password})
        assert res.status_code == 200, res.get_json()
        return {"Authorization": f"Bearer {res.get_json()['token']}"}

    return _login


@pytest.fixture
def admin_headers(auth_headers):
    return auth_headers("admin", "adminpass")


@pytest.fixture
def teacher_headers(auth_headers):
    return auth_headers("prof1", "teacherpass")


@pytest.fixture
def student_headers(auth_headers):
    return auth_headers("student1", "studentpass")
