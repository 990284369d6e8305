from hostel_api.models import FoodItem
from hostel_api.scripts.menu_data import MENU_ITEMS
from hostel_api.scripts.seed_menu import seed_menu


def test_seed_is_idempotent(db):
    assert seed_menu(db) == len(MENU_ITEMS) == 16
    assert seed_menu(db) == 0
    assert db.query(FoodItem).count() == 16


def test_seed_skips_existing_codes(db):
    db.add(FoodItem(name="House Bibimbap", price=150, code="m4"))
    db.commit()

    assert seed_menu(db) == 15
    assert db.query(FoodItem).filter(FoodItem.code.in_(["m4", "M4"])).one().name == "House Bibimbap"
