from __future__ import annotations

from typing import Protocol, Sequence

from .model import Item


class ItemRepository(Protocol):
    def list_newest_first(self) -> Sequence[Item]:
        raise NotImplementedError

    def create(self, text: str) -> Item:
        raise NotImplementedError
