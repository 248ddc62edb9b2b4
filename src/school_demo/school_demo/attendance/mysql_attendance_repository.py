from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_missing_reference
from .model import AttendanceMark, AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        student_id=int(r["student_id"]),
        course_id=int(r["course_id"]),
        date=r["date"],
        present=bool(r["present"]),
        recorded_at=r.get("recorded_at"),
        student_name=r.get("student_name"),
        course_name=r.get("course_name"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_batch(self, *, course_id: int, on_date: date, marks: Sequence[AttendanceMark]) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                for mark in marks:
                    cur.execute(
                        """
                        INSERT INTO attendance(student_id, course_id, date, present)
                        VALUES(%s, %s, %s, %s) AS new
                        ON DUPLICATE KEY UPDATE present=new.present, recorded_at=CURRENT_TIMESTAMP
                        """,
                        (mark.student_id, course_id, on_date, mark.present),
                    )
                return len(marks)
        except Exception as e:
            if is_missing_reference(e):
                raise ValidationError("unknown student_id or course_id") from e
            raise

    def list_for_course(self, *, course_id: int, on_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.student_id, a.course_id, a.date, a.present, a.recorded_at,
                       s.name AS student_name
                FROM attendance a
                JOIN students s ON s.id = a.student_id
                WHERE a.course_id=%s AND a.date=%s
                ORDER BY s.id
                """,
                (course_id, on_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_student(self, *, student_id: int, on_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.student_id, a.course_id, a.date, a.present, a.recorded_at,
                       c.name AS course_name
                FROM attendance a
                JOIN courses c ON c.id = a.course_id
                WHERE a.student_id=%s AND a.date=%s
                ORDER BY c.id
                """,
                (student_id, on_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
