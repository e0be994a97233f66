"""API Dependencies: service container access and bearer-token sessions.

Invariants:
    - _sessions maps opaque tokens to the SessionContext built at login
    - A token is valid until logout; there is no expiry or refresh
    - Every route except login and health depends on get_session_context

Design Decisions:
    - _sessions as module-level dict: single-process uvicorn, sessions lost on
      restart (clients simply log in again)
"""

import secrets

from fastapi import Depends, Header, Request

from copejem.core.errors import AuthenticationRequiredError
from copejem.core.session_context import SessionContext
from copejem.services.container import Services

_sessions: dict[str, SessionContext] = {}


def get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized")
    return services


def bearer_token(authorization: str | None = Header(None)) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def get_session_context(
    token: str | None = Depends(bearer_token),
) -> SessionContext:
    ctx = _sessions.get(token) if token else None
    if ctx is None:
        raise AuthenticationRequiredError()
    return ctx


def open_session(ctx: SessionContext) -> str:
    token = secrets.token_urlsafe(32)
    _sessions[token] = ctx
    return token


def close_session(token: str | None) -> bool:
    return token is not None and _sessions.pop(token, None) is not None
