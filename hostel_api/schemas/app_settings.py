"""
Dashboard settings schemas.
"""
from typing import Optional

from .base import CamelModel


class AppSettingsRecord(CamelModel):
    """
    The full settings record. Defaults here are the documented defaults used
    before anything is saved and by reset.
    """
    primary_color: str = "#667eea"
    secondary_color: str = "#764ba2"
    accent_color: str = "#10b981"
    danger_color: str = "#dc2626"
    font_family: str = "system-ui"
    font_size: str = "14"
    site_name: str = "Hostel Admin"
    items_per_page: str = "10"
    date_format: str = "MM/DD/YYYY"
    time_format: str = "12h"
    email_notifications: bool = True
    order_notifications: bool = True
    system_notifications: bool = True
    enable_debug_mode: bool = False
    session_timeout: str = "30"


class SettingsAction(CamelModel):
    action: Optional[str] = None
