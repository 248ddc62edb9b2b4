from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import Identity
from .model import Student
from .repository import StudentRepository


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def list_visible(self, identity: Identity) -> Sequence[Student]:
        """Staff see every student; a student sees only their linked record."""
        if identity.role != Role.STUDENT:
            return self._students.list_all()

        if not identity.student_id:
            raise AuthorizationError("no student profile")
        student = self._students.get_by_id(identity.student_id)
        return [student] if student else []

    def create_student(self, name) -> Student:
        return self._students.create(require_non_empty(name, "name required"))
