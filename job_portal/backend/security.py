"""
Signed, time-limited bearer tokens.

Tokens are self-contained JWTs: verifying one needs only the signing secret,
there is no server-side session store and no revocation list.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from .config.settings import Settings, get_settings


class InvalidTokenError(Exception):
    """Raised when a token is malformed, tampered with, or expired."""


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc


def build_user_claims(user) -> Dict[str, Any]:
    return {"userId": user.id, "email": user.email, "isAdmin": False}


def build_admin_claims(email: str) -> Dict[str, Any]:
    # The admin identity is configuration, not a stored user, so no userId.
    return {"email": email, "isAdmin": True}


def credentials_match_admin(email: str, password: str, settings: Optional[Settings] = None) -> bool:
    settings = settings or get_settings()
    return email.lower() == settings.admin_email.lower() and password == settings.admin_password
