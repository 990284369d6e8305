"""
Food catalog schemas
Path: hostel_api/schemas/food_item.py
"""
from datetime import datetime
from typing import Any, Optional, Union

from ..models.food_item import FoodCategory
from .base import CamelModel


class FoodItemCreate(CamelModel):
    """Schema for creating a menu item; checked by validate_food_item before use"""
    name: Optional[str] = None
    # number or numeric string
    price: Optional[Union[float, str]] = None
    description: Optional[str] = None
    category: Optional[str] = None
    code: Optional[str] = None
    img: Optional[str] = None
    available: Optional[bool] = True


class FoodItemUpdate(CamelModel):
    """Partial update, only fields present in the body are applied"""
    name: Optional[str] = None
    price: Optional[Any] = None
    description: Optional[str] = None
    category: Optional[str] = None
    code: Optional[str] = None
    img: Optional[str] = None
    available: Optional[bool] = None


class FoodItemOut(CamelModel):
    id: int
    name: str
    price: float
    description: Optional[str] = None
    img: Optional[str] = None
    category: Optional[FoodCategory] = None
    code: Optional[str] = None
    available: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
