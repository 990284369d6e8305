"""
Authentication utilities: JWT handling, password hashing, security dependencies.
"""
import hashlib
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from .config import settings
from .db import get_db
from .models.admin_user import AdminUser

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=12,
)

# auto_error=False: a missing header must produce our own 401 body, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


class AuthPayload(BaseModel):
    """Identity carried inside a verified bearer token"""
    user_id: int
    username: str


def _prepare_password(password: str) -> str:
    # bcrypt only looks at the first 72 bytes, pre-hash anything longer
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        return hashlib.sha256(password_bytes).hexdigest()
    return password


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hashed password.
    Handles the pre-hashing for long passwords.
    """
    try:
        return pwd_context.verify(_prepare_password(plain_password), hashed_password)
    except ValueError as e:
        # malformed or unknown hash format stored in the database
        logger.error(f"Password verification error: {e}")
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt with proper length handling.
    Bcrypt has a 72-byte limit, so we pre-hash with SHA256 for long passwords.
    """
    return pwd_context.hash(_prepare_password(password))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token

    Args:
        data: Dictionary containing user data (must include 'sub' for user_id)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token as string
    """
    to_encode = data.copy()
    now = datetime.utcnow()
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "iat": now})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_admin_token(user: AdminUser) -> str:
    """Token embedding the admin id and username"""
    return create_access_token({"sub": str(user.id), "username": user.username})


def verify_token(token: str) -> Optional[AuthPayload]:
    """
    Verify signature and expiry of a bearer token.

    Returns:
        AuthPayload if the token is valid, None otherwise
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY,
                             algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"Rejected token: {e}")
        return None

    user_id = payload.get("sub")
    username = payload.get("username")
    if user_id is None or username is None:
        return None

    try:
        return AuthPayload(user_id=int(user_id), username=username)
    except (ValueError, TypeError):
        return None


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthPayload:
    """
    Dependency gating admin-only routes.

    Raises:
        HTTPException: 401 for a missing, malformed, forged or expired token
    """
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise unauthorized

    auth = verify_token(credentials.credentials)
    if auth is None:
        raise unauthorized
    return auth


def get_admin_by_username(db: Session, username: str) -> Optional[AdminUser]:
    """Get admin by exact username"""
    return db.query(AdminUser).filter(AdminUser.username == username).first()


def get_admin_by_email(db: Session, email: str) -> Optional[AdminUser]:
    """Get admin by email, case-insensitive"""
    return db.query(AdminUser).filter(
        func.lower(AdminUser.email) == email.lower()
    ).first()


def authenticate_admin(db: Session, identifier: str, password: str) -> Optional[AdminUser]:
    """
    Authenticate an admin with username (or email) and password

    Args:
        db: Database session
        identifier: Username, or email as a fallback
        password: Plain text password

    Returns:
        AdminUser if authentication succeeds, None otherwise
    """
    user = get_admin_by_username(db, identifier) or get_admin_by_email(db, identifier)

    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def get_current_admin_user(
    db: Session = Depends(get_db),
    auth: AuthPayload = Depends(get_current_admin),
) -> AdminUser:
    """Resolve the token identity to its AdminUser row (404 if the account is gone)"""
    user = db.query(AdminUser).filter(AdminUser.id == auth.user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user
