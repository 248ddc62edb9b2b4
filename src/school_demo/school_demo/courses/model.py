from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Course:
    id: int
    name: str

    def to_dict(self) -> dict:
        return asdict(self)
