from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from hostel_api.models.app_settings import AppSettings
from hostel_api.schemas.app_settings import AppSettingsRecord


def default_settings() -> dict:
    """The documented default record, camelCase keys as stored"""
    return AppSettingsRecord().model_dump(by_alias=True)


def _get_row(db: Session) -> Optional[AppSettings]:
    return db.query(AppSettings).order_by(AppSettings.id).first()


def get_settings(db: Session) -> dict:
    """Stored settings, or the defaults when nothing was saved yet"""
    row = _get_row(db)
    if row is None or not row.settings:
        return default_settings()
    return row.settings


def update_settings(db: Session, record: AppSettingsRecord) -> dict:
    """Replace the stored record wholesale (no merge with the previous one)"""
    data = record.model_dump(by_alias=True)
    row = _get_row(db)
    now = datetime.utcnow()
    if row is None:
        row = AppSettings(settings=data, created_at=now, updated_at=now)
        db.add(row)
    else:
        row.settings = data
        row.updated_at = now
    db.commit()
    db.refresh(row)
    return row.settings


def reset_settings(db: Session) -> dict:
    return update_settings(db, AppSettingsRecord())
