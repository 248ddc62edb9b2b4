from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Student:
    id: int
    name: str

    def to_dict(self) -> dict:
        return asdict(self)
