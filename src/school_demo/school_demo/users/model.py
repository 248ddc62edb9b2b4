from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no DB access here.
    """

    id: int
    username: str
    password_hash: str
    role: Role
    student_id: Optional[int] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role.value,
            "student_id": self.student_id,
        }


@dataclass(frozen=True)
class Identity:
    """Decoded token payload attached to an authenticated request."""

    uid: int
    role: Role
    student_id: Optional[int] = None

    @classmethod
    def for_user(cls, user: User) -> "Identity":
        return cls(uid=user.id, role=user.role, student_id=user.student_id or None)

    def to_claims(self) -> dict:
        return {"uid": self.uid, "role": self.role.value, "student_id": self.student_id}

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "Identity":
        student_id = claims.get("student_id")
        return cls(
            uid=int(claims["uid"]),
            role=Role(claims["role"]),
            student_id=int(student_id) if student_id is not None else None,
        )
