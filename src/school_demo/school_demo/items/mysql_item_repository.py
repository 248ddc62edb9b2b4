from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Item
from .repository import ItemRepository


class MySQLItemRepository(ItemRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_newest_first(self) -> Sequence[Item]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, text FROM items ORDER BY id DESC")
            return [Item(id=int(r["id"]), text=r["text"]) for r in fetchall(cur)]

    def create(self, text: str) -> Item:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO items(text) VALUES(%s)", (text,))
            return Item(id=int(cur.lastrowid), text=text)
