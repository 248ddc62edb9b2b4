from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceMark:
    """One validated row of a batch: did ``student_id`` attend?"""

    student_id: int
    present: bool


@dataclass(frozen=True)
class AttendanceRecord:
    id: int
    student_id: int
    course_id: int
    date: date
    present: bool
    recorded_at: Optional[datetime] = None
    # Filled by the joined course/self views.
    student_name: Optional[str] = None
    course_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "student_id": self.student_id,
            "course_id": self.course_id,
            "date": self.date.isoformat(),
            "present": self.present,
            "recorded_at": self.recorded_at.isoformat() if self.recorded_at else None,
        }
        if self.student_name is not None:
            out["student_name"] = self.student_name
        if self.course_name is not None:
            out["course_name"] = self.course_name
        return out
