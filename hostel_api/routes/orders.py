# hostel_api\routes\orders.py
"""
Order routes: public checkout plus the admin order lifecycle
(status changes, archive, cancel, item clearing, permanent delete).
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hostel_api.CRUD import order_crud
from hostel_api.schemas.order import OrderActionResponse, OrderCreate, OrderOut, OrderUpdate

from ..auth_utils import AuthPayload, get_current_admin
from ..db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    """Checkout: place an order with at least one item"""
    return order_crud.create(db, payload)


@router.get("", response_model=List[OrderOut])
def list_orders(
    archived: Optional[bool] = Query(None, description="true: archive only, false: active only"),
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    orders = order_crud.get_all(db, archived=archived)
    pending = sum(1 for o in orders if o.status.value == "PENDING")
    logger.info(f"Found {len(orders)} orders (archived={archived}), {pending} pending")
    return orders


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    return order_crud.get_or_404(db, order_crud.parse_order_id(order_id))


@router.patch("/{order_id}", response_model=OrderOut)
def update_order(
    order_id: str,
    payload: OrderUpdate,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Change status, archive/restore, edit contact details or replace items"""
    order = order_crud.get_or_404(db, order_crud.parse_order_id(order_id))
    return order_crud.update(db, order, payload.model_dump(exclude_unset=True))


@router.delete("/{order_id}", response_model=OrderActionResponse)
def cancel_order(
    order_id: str,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Cancel and archive an order; accepted or completed orders are kept"""
    order = order_crud.get_or_404(db, order_crud.parse_order_id(order_id))
    order_crud.cancel(db, order)
    return OrderActionResponse(message="Order cancelled and archived", order_id=order.id)


@router.delete("/{order_id}/items", response_model=OrderActionResponse)
def clear_order_items(
    order_id: str,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Remove every line item of an order, the order itself stays"""
    order = order_crud.get_or_404(db, order_crud.parse_order_id(order_id))
    order_crud.clear_items(db, order)
    return OrderActionResponse(message="Order items deleted", order_id=order.id)


@router.delete("/{order_id}/permanent", response_model=OrderActionResponse)
def delete_order_permanently(
    order_id: str,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Irreversible: deletes the order and its items, recorded in the audit log"""
    parsed_id = order_crud.parse_order_id(order_id)
    order = order_crud.get_or_404(db, parsed_id)
    order_crud.delete_permanently(db, order, user_id=current.user_id)
    return OrderActionResponse(message="Order permanently deleted and logged", order_id=parsed_id)
