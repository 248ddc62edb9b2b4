from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from .model import Course
from .repository import CourseRepository


class CourseService:
    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def list_courses(self) -> Sequence[Course]:
        return self._courses.list_all()

    def create_course(self, name) -> Course:
        return self._courses.create(require_non_empty(name, "name required"))
