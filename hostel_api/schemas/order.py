"""
Order schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..models.order import OrderStatus, OrderType
from .base import CamelModel


class OrderItemIn(CamelModel):
    # id of an existing line, only meaningful when replacing an order's items
    id: Optional[int] = None
    food_id: Optional[int] = None
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    unit_price: float = Field(..., ge=0)
    notes: Optional[str] = None


class OrderCreate(CamelModel):
    customer: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    # requested delivery/pickup date (YYYY-MM-DD) and time (HH:MM)
    date: Optional[str] = None
    time: Optional[str] = None
    order_type: Optional[OrderType] = OrderType.DELIVERY
    items: Optional[List[OrderItemIn]] = None


class OrderUpdate(CamelModel):
    """
    Admin edit of an order. Every field is optional; `items`, when present,
    replaces the whole set of line items.
    """
    status: Optional[OrderStatus] = None
    archived: Optional[bool] = None
    customer: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    desired_at: Optional[datetime] = None
    items: Optional[List[OrderItemIn]] = None


class OrderItemOut(CamelModel):
    id: int
    order_id: int
    food_id: Optional[int] = None
    name: str
    quantity: int
    unit_price: float
    line_total: float
    notes: Optional[str] = None


class OrderOut(CamelModel):
    id: int
    uid: str
    customer: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    desired_at: Optional[datetime] = None
    order_type: OrderType
    status: OrderStatus
    total: float
    archived: bool
    archived_at: Optional[datetime] = None
    created_at: datetime
    items: List[OrderItemOut] = []


class OrderActionResponse(CamelModel):
    message: str
    order_id: int
