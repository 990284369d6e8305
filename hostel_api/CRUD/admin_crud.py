import logging
from datetime import datetime
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hostel_api.auth_utils import get_admin_by_username, get_password_hash, verify_password
from hostel_api.config import settings
from hostel_api.models.admin_user import AdminUser
from hostel_api.schemas.auth import ProfileUpdateRequest
from hostel_api.utils.validators import sanitize_string

logger = logging.getLogger(__name__)


def get_all(db: Session) -> List[AdminUser]:
    return db.query(AdminUser).order_by(AdminUser.id).all()


def create(db: Session, username: str, password: str) -> AdminUser:
    """Register a new admin account (409 if the username is taken)"""
    conflict = HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="username already exists"
    )
    if get_admin_by_username(db, username):
        raise conflict

    now = datetime.utcnow()
    user = AdminUser(
        username=username,
        password_hash=get_password_hash(password),
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise conflict
    db.refresh(user)

    logger.info(f"Registered admin user {user.id} ({user.username})")
    return user


def update_profile(db: Session, user: AdminUser, data: ProfileUpdateRequest) -> AdminUser:
    """
    Partial profile update. Changing the password needs the current one;
    only non-empty fields are applied.
    """
    if data.new_password:
        if not data.current_password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Current password is required to change password"
            )

        if not verify_password(data.current_password, user.password_hash):
            logger.warning(f"Wrong current password on profile update for admin {user.id}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Current password is incorrect"
            )

        if len(data.new_password) < settings.PASSWORD_MIN_LENGTH:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"New password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
            )

    username = sanitize_string(data.username)
    conflict = HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Username already taken"
    )
    if username and username != user.username:
        existing = get_admin_by_username(db, username)
        if existing and existing.id != user.id:
            raise conflict
        user.username = username

    email = sanitize_string(data.email)
    if email:
        user.email = email.lower()

    if data.new_password:
        user.password_hash = get_password_hash(data.new_password)

    user.updated_at = datetime.utcnow()
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise conflict
    db.refresh(user)

    logger.info(f"Profile updated for admin {user.id}")
    return user


def ensure_admin_exists(db: Session, username: str, password: str) -> AdminUser:
    """Create the bootstrap admin on startup if it is missing"""
    user = get_admin_by_username(db, username)
    if user:
        return user
    return create(db, username, password)
