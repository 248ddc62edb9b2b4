from __future__ import annotations

from typing import Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError

    def create(self, name: str) -> Course:
        raise NotImplementedError
