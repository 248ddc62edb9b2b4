from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, username, password_hash, role, student_id
                FROM users
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                id=int(row["id"]),
                username=row["username"],
                password_hash=row["password_hash"],
                role=Role(row["role"]),
                student_id=row.get("student_id"),
            )

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        role: Role,
        student_name: Optional[str] = None,
    ) -> User:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                student_id = None
                if student_name is not None:
                    cur.execute("INSERT INTO students(name) VALUES(%s)", (student_name,))
                    student_id = int(cur.lastrowid)

                cur.execute(
                    """
                    INSERT INTO users(username, password_hash, role, student_id)
                    VALUES(%s, %s, %s, %s)
                    """,
                    (username, password_hash, role.value, student_id),
                )
                return User(
                    id=int(cur.lastrowid),
                    username=username,
                    password_hash=password_hash,
                    role=role,
                    student_id=student_id,
                )
        except Exception as e:
            # db_cursor has already rolled back the student insert.
            if is_duplicate_key(e):
                raise ConflictError("username exists") from e
            raise
