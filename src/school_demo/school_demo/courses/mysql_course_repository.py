from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Course
from .repository import CourseRepository


class MySQLCourseRepository(CourseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM courses ORDER BY id")
            return [Course(id=int(r["id"]), name=r["name"]) for r in fetchall(cur)]

    def create(self, name: str) -> Course:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO courses(name) VALUES(%s)", (name,))
            return Course(id=int(cur.lastrowid), name=name)
