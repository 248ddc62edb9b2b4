from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .model import Identity, User
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


def _filled(*values) -> bool:
    return all(isinstance(v, str) and v for v in values)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "role": self.user.role.value,
            "uid": self.user.id,
            "student_id": self.user.student_id,
        }


class AuthService:
    """Use case: authenticate user (login) and issue a bearer token."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def login(self, username, password) -> LoginResult:
        if not _filled(username, password):
            raise ValidationError("username and password required")

        user = self._users.get_by_username(username)
        if not user:
            logger.warning("Login failed for unknown user %r", username)
            raise AuthenticationError("invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.warning("Login failed for %r: wrong password", username)
            raise AuthenticationError("invalid credentials")

        return LoginResult(token=self._tokens.issue(Identity.for_user(user)), user=user)


class UserService:
    """Use case: manage accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, *, username, password, role, student_name: Optional[str] = None) -> User:
        if not _filled(username, password, role):
            raise ValidationError("username,password,role required")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("invalid role")

        if role == Role.STUDENT:
            student_name = require_non_empty(student_name, "student_name required for role student")
        else:
            student_name = None

        if self._users.get_by_username(username):
            raise ConflictError("username exists")

        user = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
            role=role,
            student_name=student_name,
        )
        logger.info("Registered %s user %r (id=%s, student_id=%s)", role.value, username, user.id, user.student_id)
        return user
