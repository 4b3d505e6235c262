"""Login endpoints - start, end and inspect a session"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from ..auth import AuthContext, authenticate, create_session_token, get_auth_context
from ..config import SESSION_COOKIE_NAME, SESSION_COOKIE_SECURE, SESSION_MAX_AGE
from ..shared.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Login", tags=["Authentication"])


class LoginRequest(BaseModel):
    email: str
    password: str


class SessionResponse(BaseModel):
    email: Optional[str] = None
    role: Optional[str] = None
    isLoggedIn: bool
    isAdmin: bool
    token: Optional[str] = None


def _session_response(context: AuthContext, token: Optional[str] = None) -> SessionResponse:
    return SessionResponse(
        email=context.email,
        role=context.role,
        isLoggedIn=context.is_logged_in,
        isAdmin=context.is_admin,
        token=token,
    )


@router.post("", response_model=SessionResponse)
def login(data: LoginRequest, response: Response):
    """Verify credentials and start a session"""
    context = authenticate(data.email, data.password)
    if context is None:
        raise UnauthorizedException("Invalid email or password.")

    token = create_session_token(context)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="lax",
        max_age=SESSION_MAX_AGE,
        path="/",
    )
    logger.info(f"✅ {context.email} logged in as {context.role}")
    return _session_response(context, token)


@router.post("/Logout")
def logout(response: Response, context: AuthContext = Depends(get_auth_context)):
    """Clear the session cookie"""
    response.delete_cookie(key=SESSION_COOKIE_NAME, path="/")
    if context.is_logged_in:
        logger.info(f"{context.email} logged out")
    return {"message": "Logged out"}


@router.get("/Me", response_model=SessionResponse)
def current_session(context: AuthContext = Depends(get_auth_context)):
    """Report who the current session belongs to"""
    return _session_response(context)
