from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from .model import Item
from .repository import ItemRepository


class ItemService:
    """Use case: public guestbook items."""

    def __init__(self, items: ItemRepository):
        self._items = items

    def list_items(self) -> Sequence[Item]:
        return self._items.list_newest_first()

    def add_item(self, text) -> Item:
        require_non_empty(text, "text required")
        return self._items.create(text)
