from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.constants import DEMO_COURSES, DEMO_STUDENTS, DEMO_USERS, WELCOME_ITEM_TEXT
from ..core.exceptions import DatabaseInitError
from .connection import DBConfig, DatabaseConnection
from .mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _strip_comments_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?m)^\s*--.*$", "", sql)
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Plain DDL only; every ";" ends a statement.
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Optional[Path] = None) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_comments_create_db_and_use(Path(schema_path or SCHEMA_PATH).read_text(encoding="utf-8"))

    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)


def _table_is_empty(cur, table: str) -> bool:
    cur.execute(f"SELECT COUNT(*) AS n FROM {table}")
    row = fetchone(cur)
    return int(row["n"]) == 0


def ensure_seed_rows(conn_factory: DatabaseConnection) -> None:
    """Seed demo rows, each table only when it is still empty."""
    with db_cursor(conn_factory) as (_, cur):
        if _table_is_empty(cur, "items"):
            cur.execute("INSERT INTO items(text) VALUES(%s)", (WELCOME_ITEM_TEXT,))
            logger.info("Seeded welcome item")

        if _table_is_empty(cur, "students"):
            cur.executemany("INSERT INTO students(name) VALUES(%s)", [(name,) for name in DEMO_STUDENTS])
            logger.info("Seeded %d demo students", len(DEMO_STUDENTS))

        if _table_is_empty(cur, "courses"):
            cur.executemany("INSERT INTO courses(name) VALUES(%s)", [(name,) for name in DEMO_COURSES])
            logger.info("Seeded %d demo courses", len(DEMO_COURSES))

        if _table_is_empty(cur, "users"):
            cur.execute("SELECT id FROM students ORDER BY id LIMIT 1")
            first = fetchone(cur)
            first_student_id = int(first["id"]) if first else None

            for username, password, role in DEMO_USERS:
                cur.execute(
                    """
                    INSERT INTO users(username, password_hash, role, student_id)
                    VALUES(%s, %s, %s, %s)
                    """,
                    (
                        username,
                        generate_password_hash(password),
                        role,
                        first_student_id if role == "student" else None,
                    ),
                )
            logger.info(
                "Seeded users: %s",
                ", ".join(f"{username}/{password}" for username, password, _ in DEMO_USERS),
            )


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]


def initialize_database(db_config: dict) -> DatabaseConnection:
    """Apply the schema and seed demo rows; raise DatabaseInitError on any failure."""
    conn_factory = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    try:
        apply_schema(conn_factory)
        ensure_seed_rows(conn_factory)
    except (mysql.connector.Error, OSError) as e:
        raise DatabaseInitError(f"DB init failed for {conn_factory.config.describe()}: {e}") from e
    return conn_factory
