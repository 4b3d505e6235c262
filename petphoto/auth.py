"""
Access gate for the booking API.

Credentials are checked once at login against the in-memory user directory.
The resulting role marker travels in a signed session token (cookie or
Bearer header) and is turned back into an explicit AuthContext on every
request, which handlers receive through FastAPI dependencies.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext

from .config import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    SECRET_KEY,
    SESSION_COOKIE_NAME,
    SESSION_MAX_AGE,
    USER_EMAIL,
    USER_PASSWORD,
)
from .shared.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

ROLE_ADMIN = "Admin"
ROLE_USER = "User"

SESSION_SALT = "petphoto-session"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Who is calling: empty role means anonymous"""

    email: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return bool(self.role)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


ANONYMOUS = AuthContext()


def build_user_directory() -> dict[str, tuple[str, str]]:
    """Map email -> (password hash, role) for the demo accounts"""
    return {
        ADMIN_EMAIL.lower(): (pwd_context.hash(ADMIN_PASSWORD), ROLE_ADMIN),
        USER_EMAIL.lower(): (pwd_context.hash(USER_PASSWORD), ROLE_USER),
    }


USER_DIRECTORY = build_user_directory()


def authenticate(email: str, password: str) -> Optional[AuthContext]:
    """Verify credentials, returning the caller's context or None"""
    entry = USER_DIRECTORY.get((email or "").strip().lower())
    if not entry:
        logger.warning(f"⚠️ Login attempt for unknown account: {email}")
        return None

    password_hash, role = entry
    if not pwd_context.verify(password, password_hash):
        logger.warning(f"⚠️ Invalid password for {email}")
        return None

    return AuthContext(email=email.strip().lower(), role=role)


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(SECRET_KEY, salt=SESSION_SALT)


def create_session_token(context: AuthContext) -> str:
    """Sign the role marker so it can be stored client-side"""
    return _serializer().dumps({"email": context.email, "role": context.role})


def read_session_token(token: Optional[str]) -> AuthContext:
    """Decode a session token; anything invalid or expired is anonymous"""
    if not token:
        return ANONYMOUS

    try:
        data = _serializer().loads(token, max_age=SESSION_MAX_AGE)
    except SignatureExpired:
        logger.info("Session token expired")
        return ANONYMOUS
    except BadSignature:
        logger.warning("Invalid session token signature")
        return ANONYMOUS

    return AuthContext(email=data.get("email"), role=data.get("role"))


def get_auth_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthContext:
    """Resolve the caller from the Bearer header, falling back to the session cookie"""
    if credentials and credentials.credentials:
        return read_session_token(credentials.credentials)
    return read_session_token(request.cookies.get(SESSION_COOKIE_NAME))


def require_login(context: AuthContext = Depends(get_auth_context)) -> AuthContext:
    if not context.is_logged_in:
        raise UnauthorizedException("Login required")
    return context


def require_admin(context: AuthContext = Depends(get_auth_context)) -> AuthContext:
    if not context.is_logged_in:
        raise UnauthorizedException("Login required")
    if not context.is_admin:
        logger.warning(f"⚠️ Non-admin {context.email} attempted an admin-only action")
        raise UnauthorizedException("Admin access required")
    return context
