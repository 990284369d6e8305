"""
Food catalog model
Path: hostel_api/models/food_item.py
"""
from datetime import datetime
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Index, Integer, Numeric, String, Text, func
from sqlalchemy.orm import relationship

from ..db import Base


class FoodCategory(str, enum.Enum):
    main = "main"
    snacks = "snacks"
    desserts = "desserts"
    drinks = "drinks"


class FoodItem(Base):

    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=True)
    img = Column(String(500), nullable=True)
    category = Column(Enum(FoodCategory), nullable=True)
    # Menu code such as "M1"; unique ignoring case (see index below)
    code = Column(String(50), nullable=True)
    available = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)

    # Deleting an item leaves past order lines in place with food_id = NULL
    order_items = relationship(
        "OrderItem", back_populates="food", lazy="select")

    __table_args__ = (
        Index("uq_food_items_code_lower", func.lower(code), unique=True),
    )
