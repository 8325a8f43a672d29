import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas
from ..config.settings import get_settings
from ..errors import ConflictError, ForbiddenError, UnauthorizedError, ValidationError
from ..models.db import crud
from ..models.db.database import get_db
from ..security import (
    InvalidTokenError,
    build_admin_claims,
    build_user_claims,
    create_access_token,
    credentials_match_admin,
    decode_access_token,
)
from ..utils.api_helpers import SERVER_ERROR_RETRY, handle_storage_error, is_duplicate_key, require_fields

logger = logging.getLogger(__name__)

router = APIRouter()

CREDENTIALS_REQUIRED = "Email and password are required."
INVALID_LOGIN = "Invalid email or password."
EMAIL_TAKEN = "User with this email already exists."

# auto_error is off so a missing or foreign header is answered with our own 401.
bearer_scheme = HTTPBearer(scheme_name="Bearer", auto_error=False)


# =============================================================================
# GUARDS
# =============================================================================

def has_no_token(authorization: str) -> bool:
    """True when there is no header, or a Bearer scheme with nothing after it."""
    scheme, token = get_authorization_scheme_param(authorization)
    return not authorization or (scheme.lower() == "bearer" and not token)


def get_token_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)
) -> schemas.TokenClaims:
    """Require any valid token and return its claims."""
    if credentials is None:
        if has_no_token(request.headers.get("Authorization", "")):
            raise UnauthorizedError("Access denied. No token provided.")
        logger.debug("Rejected non-bearer Authorization header")
        raise UnauthorizedError("Invalid token.")
    try:
        payload = decode_access_token(credentials.credentials)
        return schemas.TokenClaims.model_validate(payload)
    except (InvalidTokenError, ValueError) as e:
        logger.debug("Rejected bearer token: %s", e)
        raise UnauthorizedError("Invalid token.")


def get_admin_claims(claims: schemas.TokenClaims = Depends(get_token_claims)) -> schemas.TokenClaims:
    """Require a valid token carrying the admin flag."""
    if not claims.is_admin:
        raise ForbiddenError("Access denied. Admin only.")
    return claims


# =============================================================================
# ROUTES
# =============================================================================

@router.post("/register", response_model=schemas.Message, status_code=status.HTTP_201_CREATED)
def register(credentials: schemas.Credentials, db: Session = Depends(get_db)):
    require_fields(CREDENTIALS_REQUIRED, credentials.email, credentials.password)

    settings = get_settings()
    if len(credentials.password) < settings.min_password_length:
        raise ValidationError(f"Password must be at least {settings.min_password_length} characters.")

    try:
        if crud.get_user_by_email(db, email=credentials.email):
            raise ConflictError(EMAIL_TAKEN)
        crud.create_user(db, email=credentials.email, password=credentials.password)
    except SQLAlchemyError as e:
        db.rollback()
        if is_duplicate_key(e):
            raise ConflictError(EMAIL_TAKEN)
        raise handle_storage_error(e, "Registration", SERVER_ERROR_RETRY)

    logger.info("Registered user %s", credentials.email.lower())
    return {"message": "Registration successful. Please login."}


@router.post("/login", response_model=schemas.TokenResponse)
def login(credentials: schemas.Credentials, db: Session = Depends(get_db)):
    require_fields(CREDENTIALS_REQUIRED, credentials.email, credentials.password)

    try:
        user = crud.get_user_by_email(db, email=credentials.email)
    except SQLAlchemyError as e:
        raise handle_storage_error(e, "Login", SERVER_ERROR_RETRY)

    # Plain-text comparison; passwords are stored verbatim.
    if not user or credentials.password != user.password:
        raise ValidationError(INVALID_LOGIN)

    token = create_access_token(build_user_claims(user))
    return {"token": token, "email": user.email, "message": "Login successful."}


@router.post("/admin-login", response_model=schemas.TokenResponse)
def admin_login(credentials: schemas.Credentials):
    require_fields(CREDENTIALS_REQUIRED, credentials.email, credentials.password)

    if not credentials_match_admin(credentials.email, credentials.password):
        logger.warning("Failed admin login for %s", credentials.email)
        raise ValidationError("Invalid admin credentials.")

    admin_email = get_settings().admin_email
    token = create_access_token(build_admin_claims(admin_email))
    return {"token": token, "email": admin_email, "message": "Admin login successful."}
