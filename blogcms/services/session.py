"""
Session provider.

Answers "who is calling?" for a request. Only verification lives here;
sessions are issued by the authentication service.
"""

from typing import Protocol

from fastapi import Request
from fastapi.security.utils import get_authorization_scheme_param

from blogcms.managers.token_manager import decode_access_token
from blogcms.schemas.auth import SessionData


class SessionProvider(Protocol):
    """Resolve the current session, or None when the caller is anonymous."""

    async def current_session(self) -> SessionData | None: ...


class BearerSessionProvider:
    """
    Session read from an ``Authorization: Bearer <jwt>`` header.

    A missing, malformed, expired or otherwise invalid token all mean
    "no session"; the caller decides what that implies.
    """

    def __init__(self, request: Request) -> None:
        self.request = request

    async def current_session(self) -> SessionData | None:
        scheme, token = get_authorization_scheme_param(self.request.headers.get("Authorization"))
        if scheme.lower() != "bearer" or not token:
            return None

        token_data = decode_access_token(token)
        if token_data is None:
            return None
        return SessionData(user_id=token_data.user_id)
