"""
AdminUser model: accounts allowed into the admin dashboard.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String

from ..db import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    # stored lower-case, login accepts it in place of the username
    email = Column(String(255), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)
