from __future__ import annotations

from itsdangerous import BadSignature, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, TOKEN_SALT
from ..core.exceptions import AuthenticationError
from .model import Identity


class TokenService:
    """Signs and verifies time-limited bearer tokens carrying an Identity."""

    def __init__(self, secret_key: str, *, ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS):
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)
        self._max_age = int(ttl_hours) * 3600

    def issue(self, identity: Identity) -> str:
        return self._serializer.dumps(identity.to_claims())

    def verify(self, token: str) -> Identity:
        try:
            claims = self._serializer.loads(token, max_age=self._max_age)
            return Identity.from_claims(claims)
        except (BadSignature, KeyError, TypeError, ValueError) as e:
            raise AuthenticationError("invalid token") from e
