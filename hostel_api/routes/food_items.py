"""
Food catalog routes
Path: hostel_api/routes/food_items.py
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from hostel_api.CRUD import food_item_crud
from hostel_api.schemas.food_item import FoodItemCreate, FoodItemOut, FoodItemUpdate

from ..auth_utils import AuthPayload, get_current_admin
from ..db import get_db

router = APIRouter(prefix="/food-items", tags=["Food Catalog"])


# ============ public routes ============

@router.get("", response_model=List[FoodItemOut])
def list_food_items(
    available: Optional[bool] = Query(None, description="Only available / unavailable items"),
    db: Session = Depends(get_db),
):
    return food_item_crud.get_all(db, available=available)


@router.get("/{item_id}", response_model=FoodItemOut)
def get_food_item(item_id: int, db: Session = Depends(get_db)):
    return food_item_crud.get_or_404(db, item_id)


# ============ admin routes ============

@router.post("", response_model=FoodItemOut, status_code=status.HTTP_201_CREATED)
def create_food_item(
    request: FoodItemCreate,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Create a new menu item (admin only)"""
    return food_item_crud.create(db, request)


@router.patch("/{item_id}", response_model=FoodItemOut)
def update_food_item(
    item_id: int,
    request: FoodItemUpdate,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """Partial update; `code` stays unique ignoring case"""
    return food_item_crud.update(db, item_id, request.model_dump(exclude_unset=True))


@router.delete("/{item_id}")
def delete_food_item(
    item_id: int,
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    food_item_crud.delete(db, item_id)
    return {"success": True, "id": item_id}
