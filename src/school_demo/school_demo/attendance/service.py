from __future__ import annotations

import logging
from typing import Any, List, Sequence

from ..common.validators import require_bool, require_date, require_int
from ..core.exceptions import ValidationError
from ..users.model import Identity
from .model import AttendanceMark, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

BATCH_REQUIRED = "course_id, date and records[] required"
BAD_RECORD = "each record must have student_id (number) and present (boolean)"


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def _parse_marks(self, records: Sequence[Any]) -> List[AttendanceMark]:
        marks: List[AttendanceMark] = []
        for r in records:
            if not isinstance(r, dict):
                raise ValidationError(BAD_RECORD)
            marks.append(
                AttendanceMark(
                    student_id=require_int(r.get("student_id"), BAD_RECORD),
                    present=require_bool(r.get("present"), BAD_RECORD),
                )
            )
        return marks

    def record_batch(self, *, course_id, on_date, records) -> int:
        """Validate every record first, then upsert the whole batch atomically.

        A second write for the same (student, course, date) overwrites
        ``present`` and refreshes ``recorded_at``.
        """
        if not course_id or not on_date or not isinstance(records, list):
            raise ValidationError(BATCH_REQUIRED)

        course_id = require_int(course_id, "course_id must be an integer")
        day = require_date(on_date, BATCH_REQUIRED)
        marks = self._parse_marks(records)

        written = self._attendance.upsert_batch(course_id=course_id, on_date=day, marks=marks)
        logger.info("Recorded attendance for course %s on %s (%d rows)", course_id, day, written)
        return written

    def list_for_course(self, *, course_id, on_date) -> Sequence[AttendanceRecord]:
        if not course_id or not on_date:
            raise ValidationError("course_id and date required")
        return self._attendance.list_for_course(
            course_id=require_int(course_id, "course_id must be an integer"),
            on_date=require_date(on_date, "date required"),
        )

    def list_own(self, identity: Identity, *, on_date) -> Sequence[AttendanceRecord]:
        if not on_date:
            raise ValidationError("date required")
        if not identity.student_id:
            raise ValidationError("student profile not linked")
        return self._attendance.list_for_student(
            student_id=identity.student_id,
            on_date=require_date(on_date, "date required"),
        )
