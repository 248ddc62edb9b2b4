from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceMark, AttendanceRecord


class AttendanceRepository(Protocol):
    def upsert_batch(self, *, course_id: int, on_date: date, marks: Sequence[AttendanceMark]) -> int:
        """Insert or update every mark in one transaction; return the number of rows written."""
        raise NotImplementedError

    def list_for_course(self, *, course_id: int, on_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, *, student_id: int, on_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
