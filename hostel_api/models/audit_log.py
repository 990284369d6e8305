"""
AuditLog model: trail of irreversible admin actions (permanent deletes).
Path: hostel_api/models/audit_log.py
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from datetime import datetime

from ..db import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String(50), nullable=False)
    table_name = Column(String(100), nullable=False)
    record_id = Column(String(100), nullable=False)
    # admin who performed the action, kept as a plain id so the log survives account removal
    user_id = Column(Integer, nullable=True)
    # JSON snapshot of the removed record
    details = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
