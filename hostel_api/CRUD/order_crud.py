import json
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from hostel_api.CRUD import food_item_crud
from hostel_api.models.audit_log import AuditLog
from hostel_api.models.order import Order, OrderItem, OrderStatus, OrderType
from hostel_api.schemas.order import OrderCreate, OrderItemIn
from hostel_api.utils.date_utils import combine_date_time, to_naive_utc
from hostel_api.utils.validators import (
    is_valid_address,
    is_valid_email,
    is_valid_phone_number,
    sanitize_string,
    validate_order_input,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# orders in these states can no longer be cancelled by the admin
LOCKED_STATUSES = (OrderStatus.ACCEPTED, OrderStatus.COMPLETED)


def parse_order_id(raw_id: str) -> int:
    """Path ids arrive as text; reject anything non-numeric before touching the database"""
    try:
        order_id = int(str(raw_id).strip())
    except (TypeError, ValueError):
        order_id = None
    if order_id is None or order_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid order ID"
        )
    return order_id


def line_total(quantity: int, unit_price: Decimal) -> Decimal:
    return (Decimal(quantity) * unit_price).quantize(CENT)


def get_all(db: Session, archived: Optional[bool] = None) -> List[Order]:
    """Orders newest first, optionally filtered on the archived flag"""
    query = db.query(Order).options(selectinload(Order.items))
    if archived is not None:
        query = query.filter(Order.archived == archived)
    return query.order_by(Order.id.desc()).all()


def get_by_id(db: Session, order_id: int) -> Optional[Order]:
    return db.query(Order).options(selectinload(Order.items)).filter(
        Order.id == order_id
    ).first()


def get_or_404(db: Session, order_id: int) -> Order:
    order = get_by_id(db, order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )
    return order


def _ensure_food_items_exist(db: Session, items: List[OrderItemIn]) -> None:
    food_ids = [it.food_id for it in items if it.food_id is not None]
    existing_ids = {fi.id for fi in food_item_crud.get_by_ids(db, food_ids)}
    missing = [str(fid) for fid in food_ids if fid not in existing_ids]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"The following food items do not exist: {', '.join(missing)}. Please check the menu."
        )


def _build_item(item_in: OrderItemIn) -> OrderItem:
    unit_price = Decimal(str(item_in.unit_price)).quantize(CENT)
    return OrderItem(
        food_id=item_in.food_id,
        name=item_in.name.strip(),
        quantity=item_in.quantity,
        unit_price=unit_price,
        line_total=line_total(item_in.quantity, unit_price),
        notes=sanitize_string(item_in.notes),
    )


def _recompute_total(order: Order) -> None:
    order.total = sum((Decimal(it.line_total) for it in order.items), Decimal("0.00"))


def create(db: Session, payload: OrderCreate) -> Order:
    """
    Create an order with its line items.

    Header and items are written in one transaction: either the whole
    order is visible afterwards or nothing is.
    """
    valid, errors = validate_order_input(payload.model_dump())
    if not valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="; ".join(errors)
        )

    _ensure_food_items_exist(db, payload.items)

    order = Order(
        customer=sanitize_string(payload.customer),
        contact_number=sanitize_string(payload.contact_number),
        email=sanitize_string(payload.email),
        address=sanitize_string(payload.address),
        desired_at=combine_date_time(payload.date, payload.time),
        order_type=payload.order_type or OrderType.DELIVERY,
        status=OrderStatus.PENDING,
        archived=False,
        created_at=datetime.utcnow(),
    )
    order.items = [_build_item(it) for it in payload.items]
    _recompute_total(order)

    try:
        db.add(order)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(order)

    logger.info(
        f"Order #{order.id} created: {len(order.items)} items, total {order.total}")
    return order


def _validate_contact_changes(changes: dict) -> None:
    if changes.get("email") and not is_valid_email(changes["email"]):
        raise HTTPException(status_code=400, detail="Invalid email format")
    if changes.get("contact_number") and not is_valid_phone_number(changes["contact_number"]):
        raise HTTPException(status_code=400, detail="Invalid phone number format")
    if changes.get("address") and not is_valid_address(changes["address"]):
        raise HTTPException(status_code=400, detail="Address must be at least 5 characters")


def archive(db: Session, order: Order, commit: bool = True) -> Order:
    order.archived = True
    order.archived_at = datetime.utcnow()
    if commit:
        db.commit()
        db.refresh(order)
        logger.info(f"Order #{order.id} archived")
    return order


def restore(db: Session, order: Order, commit: bool = True) -> Order:
    order.archived = False
    order.archived_at = None
    if commit:
        db.commit()
        db.refresh(order)
        logger.info(f"Order #{order.id} restored from archive")
    return order


def replace_items(db: Session, order: Order, items: List[OrderItemIn], commit: bool = True) -> Order:
    """
    Replace the full set of line items. Lines whose id matches an existing
    line are updated in place, the rest are added, and lines left out are
    deleted. An empty list clears the order. The stored total follows the
    new set of lines.
    """
    line_ids = [it.id for it in items if it.id is not None]
    if len(line_ids) != len(set(line_ids)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Duplicate order item ID"
        )

    _ensure_food_items_exist(db, items)

    existing = {it.id: it for it in order.items}
    new_items = []
    for item_in in items:
        current = existing.get(item_in.id) if item_in.id is not None else None
        if current is None:
            new_items.append(_build_item(item_in))
            continue
        built = _build_item(item_in)
        current.food_id = built.food_id
        current.name = built.name
        current.quantity = built.quantity
        current.unit_price = built.unit_price
        current.line_total = built.line_total
        current.notes = built.notes
        new_items.append(current)

    # delete-orphan cascade removes the lines that were dropped
    order.items = new_items
    _recompute_total(order)

    if commit:
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(order)
        logger.info(f"Order #{order.id} items replaced: {len(new_items)} lines")
    return order


def clear_items(db: Session, order: Order) -> Order:
    return replace_items(db, order, [])


def update(db: Session, order: Order, changes: dict) -> Order:
    """Admin edit of an order, `changes` holds only the fields that were sent"""
    _validate_contact_changes(changes)

    if changes.get("status") is not None:
        order.status = OrderStatus(changes["status"])

    if changes.get("archived") is not None:
        if changes["archived"]:
            archive(db, order, commit=False)
        else:
            restore(db, order, commit=False)

    for field in ("customer", "contact_number", "email", "address"):
        if field in changes:
            setattr(order, field, sanitize_string(changes[field]))

    if "desired_at" in changes:
        desired_at = changes["desired_at"]
        order.desired_at = to_naive_utc(desired_at) if desired_at else None

    if changes.get("items") is not None:
        items = [OrderItemIn(**it) if isinstance(it, dict) else it for it in changes["items"]]
        replace_items(db, order, items, commit=False)

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(order)
    logger.info(f"Order #{order.id} updated: {sorted(changes)}")
    return order


def cancel(db: Session, order: Order) -> Order:
    """Cancel and archive an order that has not been accepted yet"""
    if order.status in LOCKED_STATUSES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete orders that have been accepted or completed"
        )
    order.status = OrderStatus.CANCELLED
    archive(db, order, commit=False)
    db.commit()
    db.refresh(order)
    logger.info(f"Order #{order.id} cancelled and archived")
    return order


def delete_permanently(db: Session, order: Order, user_id: Optional[int] = None) -> None:
    """
    Remove an order and its items for good, leaving an audit trail entry.
    The audit row and the delete share one transaction.
    """
    details = {
        "orderId": order.id,
        "uid": order.uid,
        "customer": order.customer,
        "total": float(order.total or 0),
        "itemsCount": len(order.items),
        "status": order.status.value if order.status else None,
        "deletedAt": datetime.utcnow().isoformat(),
    }
    db.add(AuditLog(
        action="DELETE",
        table_name="order",
        record_id=str(order.id),
        user_id=user_id,
        details=json.dumps(details),
    ))
    db.delete(order)

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info(f"Order #{details['orderId']} permanently deleted and logged")
