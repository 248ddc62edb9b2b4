from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Item:
    id: int
    text: str

    def to_dict(self) -> dict:
        return asdict(self)
