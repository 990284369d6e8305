"""
Dashboard settings routes. Reading is public (the storefront uses the
theme), changing requires an admin token.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from hostel_api.CRUD import settings_crud
from hostel_api.schemas.app_settings import AppSettingsRecord, SettingsAction

from ..auth_utils import AuthPayload, get_current_admin
from ..db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/settings", tags=["settings"])


@router.get("", response_model=AppSettingsRecord)
def get_settings(db: Session = Depends(get_db)):
    return settings_crud.get_settings(db)


@router.put("", response_model=AppSettingsRecord)
def save_settings(
    record: AppSettingsRecord,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    saved = settings_crud.update_settings(db, record)
    logger.info(f"Settings saved by {current.username}")
    return saved


@router.post("", response_model=AppSettingsRecord)
def settings_action(
    body: SettingsAction,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Only `{"action": "reset"}` is supported"""
    if body.action != "reset":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid action"
        )

    defaults = settings_crud.reset_settings(db)
    logger.info(f"Settings reset to defaults by {current.username}")
    return defaults
