"""
Script to populate the food catalog with the hostel menu
Path: hostel_api/scripts/seed_menu.py

Run with: python -m hostel_api.scripts.seed_menu
Items are matched on code, existing ones are left untouched.
"""
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from hostel_api.CRUD.food_item_crud import get_by_code
from hostel_api.config import settings
from hostel_api.db import Base, SessionLocal, engine
from hostel_api.models.food_item import FoodCategory, FoodItem
from hostel_api.scripts.menu_data import MENU_ITEMS

logger = logging.getLogger(__name__)


def seed_menu(db: Session) -> int:
    """Insert menu items whose code is not in the catalog yet, returns how many were added"""
    created = 0
    for entry in MENU_ITEMS:
        if get_by_code(db, entry["code"]):
            continue
        db.add(FoodItem(
            name=entry["name"],
            price=Decimal(str(entry["price"])),
            description=entry["description"],
            img=entry["img"],
            category=FoodCategory(entry["category"]),
            code=entry["code"],
            available=True,
        ))
        created += 1

    db.commit()
    logger.info(f"Seeded {created} of {len(MENU_ITEMS)} menu items")
    return created


def main():
    logging.basicConfig(level=logging.INFO)
    if settings.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_menu(db)
    except Exception:
        logger.exception("❌ Error seeding menu")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
