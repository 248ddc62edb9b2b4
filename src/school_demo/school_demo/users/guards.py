"""Request guards: bearer-token authentication and role allow-lists.

Usage in a controller::

    login_required = authenticate(container.token_service)

    @app.route(...)
    @login_required
    @authorize(Role.ADMIN)
    def view(): ...
"""
from __future__ import annotations

from functools import wraps

from flask import g, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .tokens import TokenService

BEARER_PREFIX = "Bearer "


def authenticate(tokens: TokenService):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization", "")
            if not header.startswith(BEARER_PREFIX) or not header[len(BEARER_PREFIX):].strip():
                raise AuthenticationError("missing token")
            g.identity = tokens.verify(header[len(BEARER_PREFIX):].strip())
            return view(*args, **kwargs)

        return wrapper

    return decorator


def authorize(*roles: Role):
    """Allow only the given roles; with no roles, any authenticated user passes."""

    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = g.get("identity")
            if identity is None:
                raise AuthenticationError("not authenticated")
            if allowed and identity.role not in allowed:
                raise AuthorizationError("forbidden")
            return view(*args, **kwargs)

        return wrapper

    return decorator
