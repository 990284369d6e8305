import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hostel_api.models.food_item import FoodCategory, FoodItem
from hostel_api.schemas.food_item import FoodItemCreate
from hostel_api.utils.validators import parse_number, sanitize_string, validate_food_item

logger = logging.getLogger(__name__)

CODE_EXISTS = "Code already exists"
CODE_INDEX = "uq_food_items_code_lower"


def _parse_category(value: Optional[str]) -> Optional[FoodCategory]:
    value = sanitize_string(value)
    if value is None:
        return None
    try:
        return FoodCategory(value.lower())
    except ValueError:
        allowed = ", ".join(c.value for c in FoodCategory)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid category '{value}'. Allowed: {allowed}",
        )


def get_all(db: Session, available: Optional[bool] = None) -> List[FoodItem]:
    """All menu items, grouped by category then code"""
    query = db.query(FoodItem)
    if available is not None:
        query = query.filter(FoodItem.available == available)
    return query.order_by(FoodItem.category, FoodItem.code, FoodItem.id).all()


def get_by_id(db: Session, item_id: int) -> Optional[FoodItem]:
    return db.query(FoodItem).filter(FoodItem.id == item_id).first()


def get_or_404(db: Session, item_id: int) -> FoodItem:
    item = get_by_id(db, item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Food item not found"
        )
    return item


def get_by_code(db: Session, code: str) -> Optional[FoodItem]:
    """Get food item by code, ignoring case"""
    return db.query(FoodItem).filter(
        func.lower(FoodItem.code) == code.lower()
    ).first()


def get_by_ids(db: Session, ids: List[int]) -> List[FoodItem]:
    if not ids:
        return []
    return db.query(FoodItem).filter(FoodItem.id.in_(ids)).all()


def _is_code_conflict(
    db: Session, error: IntegrityError, item_id: Optional[int], code: Optional[str]
) -> bool:
    if CODE_INDEX in str(error.orig):
        return True
    # drivers that do not name the index: look the code up again
    if not code:
        return False
    existing = get_by_code(db, code)
    return existing is not None and existing.id != item_id


def _commit_or_code_conflict(db: Session, item: FoodItem) -> FoodItem:
    # the unique index on lower(code) is the source of truth, the pre-check can race
    item_id, code = item.id, item.code
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not _is_code_conflict(db, e, item_id, code):
            raise
        logger.warning(f"Food item code conflict on commit: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=CODE_EXISTS
        )
    db.refresh(item)
    return item


def create(db: Session, data: FoodItemCreate) -> FoodItem:
    """Create a menu item"""
    valid, errors = validate_food_item(data.model_dump())
    if not valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="; ".join(errors)
        )

    code = sanitize_string(data.code)
    if code and get_by_code(db, code):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=CODE_EXISTS
        )

    item = FoodItem(
        name=data.name.strip(),
        price=Decimal(str(parse_number(data.price))),
        description=data.description or None,
        category=_parse_category(data.category),
        code=code,
        img=data.img or None,
        available=True if data.available is None else data.available,
    )
    db.add(item)
    item = _commit_or_code_conflict(db, item)
    logger.info(f"Created food item {item.id} ({item.code or item.name})")
    return item


def update(db: Session, item_id: int, changes: dict) -> FoodItem:
    """
    Apply a partial update. `changes` holds only the fields sent by the
    client; everything is validated before the row is touched.
    """
    item = get_or_404(db, item_id)
    update_data = {}

    if "code" in changes:
        new_code = sanitize_string(changes["code"])
        current_code = (item.code or "").lower()
        if new_code and new_code.lower() != current_code:
            existing = get_by_code(db, new_code)
            if existing and existing.id != item.id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=CODE_EXISTS
                )
        update_data["code"] = new_code

    if "name" in changes:
        name = sanitize_string(changes["name"])
        if not name or len(name) < 2:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Name must be at least 2 characters"
            )
        update_data["name"] = name

    if "price" in changes:
        price = parse_number(changes["price"])
        if price is None or price < 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid price value"
            )
        update_data["price"] = Decimal(str(price))

    if "category" in changes:
        update_data["category"] = _parse_category(changes["category"])

    for field in ("description", "img"):
        if field in changes:
            update_data[field] = changes[field] or None

    if changes.get("available") is not None:
        update_data["available"] = bool(changes["available"])

    for field, value in update_data.items():
        setattr(item, field, value)

    item = _commit_or_code_conflict(db, item)
    logger.info(f"Updated food item {item.id}: {sorted(update_data)}")
    return item


def delete(db: Session, item_id: int) -> bool:
    """Delete a menu item; past order lines keep their name/price snapshot"""
    item = get_or_404(db, item_id)
    db.delete(item)
    db.commit()
    logger.info(f"Deleted food item {item_id}")
    return True
