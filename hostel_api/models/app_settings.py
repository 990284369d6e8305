"""
AppSettings model: single row holding the dashboard display/notification settings.
"""
from datetime import datetime
from sqlalchemy import JSON, Column, DateTime, Integer

from ..db import Base


class AppSettings(Base):
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, index=True)
    settings = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)
