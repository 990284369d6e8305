# hostel_api\routes\admin.py
"""
Admin account routes: login, registration and profile.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from hostel_api.CRUD import admin_crud
from hostel_api.models.admin_user import AdminUser
from hostel_api.schemas.auth import (
    AdminUserOut,
    LoginRequest,
    LoginResponse,
    ProfileSummary,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    RegisterRequest,
    RegisterResponse,
)

from .. import auth_utils
from ..db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
):
    if not request.username or not request.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="username/email and password required"
        )

    user = auth_utils.authenticate_admin(db, request.username, request.password)

    # same answer for unknown user and wrong password
    if not user:
        logger.warning(f"❌ Authentication failed for {request.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid credentials"
        )
    logger.info(f"✅ Authentication successful for {user.username}")

    return LoginResponse(
        token=auth_utils.create_admin_token(user),
        username=user.username,
        user_id=user.id,
    )


@router.get("/register", response_model=List[AdminUserOut])
def list_admins(
    db: Session = Depends(get_db),
    current: auth_utils.AuthPayload = Depends(auth_utils.get_current_admin),
):
    """List admin accounts (never the password hashes)"""
    return admin_crud.get_all(db)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_admin(request: RegisterRequest, db: Session = Depends(get_db)):
    username = (request.username or "").strip()
    if not username or not request.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="username and password required"
        )

    user = admin_crud.create(db, username, request.password)
    return RegisterResponse(id=user.id, username=user.username)


@router.get("/profile", response_model=AdminUserOut)
def get_profile(current: AdminUser = Depends(auth_utils.get_current_admin_user)):
    return AdminUserOut(
        id=current.id,
        username=current.username,
        email=current.email or "",
        created_at=current.created_at,
        updated_at=current.updated_at,
    )


@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    request: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    current: AdminUser = Depends(auth_utils.get_current_admin_user),
):
    user = admin_crud.update_profile(db, current, request)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=ProfileSummary(id=user.id, username=user.username, email=user.email or ""),
    )
