from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM students ORDER BY id")
            return [Student(id=int(r["id"]), name=r["name"]) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM students WHERE id=%s", (student_id,))
            row = fetchone(cur)
            if not row:
                return None
            return Student(id=int(row["id"]), name=row["name"])

    def create(self, name: str) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO students(name) VALUES(%s)", (name,))
            return Student(id=int(cur.lastrowid), name=name)
