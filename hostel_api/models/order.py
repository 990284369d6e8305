"""
Order and OrderItem models.
"""
from datetime import datetime
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ..db import Base


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class OrderType(str, enum.Enum):
    DELIVERY = "DELIVERY"
    PICKUP = "PICKUP"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Customer details, all optional for walk-in orders
    customer = Column(String(255), nullable=True)
    contact_number = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    desired_at = Column(DateTime, nullable=True)

    order_type = Column(Enum(OrderType), default=OrderType.DELIVERY,
                        nullable=False)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING,
                    nullable=False, index=True)
    total = Column(Numeric(10, 2), default=0, nullable=False)

    # soft delete
    archived = Column(Boolean, default=False, nullable=False, index=True)
    archived_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow,
                        nullable=False, index=True)

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItem.id",
        lazy="select",
    )

    @property
    def uid(self) -> str:
        """Display reference shown to customers, e.g. ORD000042"""
        return f"ORD{(self.id or 0):06d}"


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey(
        "orders.id", ondelete="CASCADE"), nullable=False, index=True)
    food_id = Column(Integer, ForeignKey(
        "food_items.id", ondelete="SET NULL"), nullable=True)

    # snapshot of the menu entry at order time
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    line_total = Column(Numeric(10, 2), nullable=False)
    notes = Column(Text, nullable=True)

    order = relationship("Order", back_populates="items")
    food = relationship("FoodItem", back_populates="order_items")
