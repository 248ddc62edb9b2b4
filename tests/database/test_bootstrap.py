from __future__ import annotations

import mysql.connector
import pytest

from src.school_demo.school_demo.core.exceptions import DatabaseInitError
from src.school_demo.school_demo.database import bootstrap
from src.school_demo.school_demo.database.connection import DBConfig, DatabaseConnection


class FakeCursor:
    def __init__(self, counts):
        self._counts = counts
        self._last = None
        self.statements = []

    def execute(self, sql, params=None):
        self.statements.append((" ".join(sql.split()), params))
        self._last = sql

    def executemany(self, sql, seq):
        for params in seq:
            self.execute(sql, params)

    def fetchone(self):
        sql = self._last
        if "COUNT(*)" in sql:
            table = sql.rsplit(" ", 1)[-1]
            return {"n": self._counts.get(table, 0)}
        if "FROM students" in sql:
            return {"id": 1}
        return None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeFactory:
    def __init__(self, counts):
        self.cursor = FakeCursor(counts)
        self.connection = FakeConnection(self.cursor)

    def connect(self, *, with_database=True):
        return self.connection


def _inserts(cursor, table):
    return [params for sql, params in cursor.statements if sql.startswith(f"INSERT INTO {table}")]


def test_schema_file_splits_into_create_statements():
    sql = bootstrap._strip_comments_create_db_and_use(bootstrap.SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(bootstrap._iter_sql_statements(sql))

    assert len(statements) == 5
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_splitter_drops_empty_statements():
    statements = list(bootstrap._iter_sql_statements("CREATE TABLE a (id INT);\n\n;CREATE TABLE b (id INT);  "))

    assert statements == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]


def test_seed_fills_empty_tables():
    factory = FakeFactory(counts={})

    bootstrap.ensure_seed_rows(factory)

    cur = factory.cursor
    assert _inserts(cur, "items") == [("Bienvenidos a Kubernetes demo",)]
    assert len(_inserts(cur, "students")) == 3
    assert len(_inserts(cur, "courses")) == 2
    users = _inserts(cur, "users")
    assert [(u[0], u[2], u[3]) for u in users] == [
        ("admin", "admin", None),
        ("prof1", "teacher", None),
        ("student1", "student", 1),
    ]
    assert factory.connection.committed


def test_seed_leaves_populated_tables_alone():
    factory = FakeFactory(counts={"items": 4, "students": 3, "courses": 2, "users": 3})

    bootstrap.ensure_seed_rows(factory)

    assert not [sql for sql, _ in factory.cursor.statements if sql.startswith("INSERT")]


def test_initialize_database_wraps_driver_errors(monkeypatch):
    def unreachable(self, *, with_database=True):
        raise mysql.connector.errors.InterfaceError("Can't connect to MySQL server")

    monkeypatch.setattr(DatabaseConnection, "_instance", None)
    monkeypatch.setattr(DatabaseConnection, "connect", unreachable)

    with pytest.raises(DatabaseInitError):
        bootstrap.initialize_database({"host": "db", "user": "root", "password": "x", "database": "demo"})


def test_db_config_from_dict_defaults():
    cfg = DBConfig.from_dict({"host": "db"})

    assert cfg.port == 3306
    assert cfg.describe() == "root@db:3306/school_demo"
