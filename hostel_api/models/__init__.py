# Import models in dependency order to avoid relationship resolution issues

# Base models first (no foreign key dependencies)
from .admin_user import AdminUser
from .app_settings import AppSettings
from .audit_log import AuditLog
from .food_item import FoodItem, FoodCategory

# Models that depend on FoodItem
from .order import Order, OrderItem, OrderStatus, OrderType

# Export all models
__all__ = [
    "AdminUser",
    "AppSettings",
    "AuditLog",
    "FoodItem",
    "FoodCategory",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderType",
]
