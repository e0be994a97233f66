"""Auth Routes: login, logout, and the current session marker.

Invariants:
    - A failed login is a 401 with no hint about which part mismatched
    - The session marker never carries the password
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from copejem.api.dependencies import (
    bearer_token, close_session, get_services, get_session_context, open_session,
)
from copejem.core.session_context import SessionContext
from copejem.schemas.auth import LoginRequest
from copejem.services.container import Services

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login")
async def login(body: LoginRequest, services: Services = Depends(get_services)):
    ctx = await services.auth.login(body.identifier, body.password)
    if ctx is None:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials. Try again.",
        )
    return {"token": open_session(ctx), "session": ctx.to_marker()}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str | None = Depends(bearer_token),
    ctx: SessionContext = Depends(get_session_context),
):
    close_session(token)
    logger.info(f"Member {ctx.user_id} logged out", extra={"actor_id": ctx.user_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me")
async def me(ctx: SessionContext = Depends(get_session_context)):
    return ctx.to_marker()
