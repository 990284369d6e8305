import os

# must be set before hostel_api.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"
os.environ["SEED_MENU"] = "false"
os.environ.pop("DEFAULT_ADMIN_USERNAME", None)
os.environ.pop("DEFAULT_ADMIN_PASSWORD", None)

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hostel_api.auth_utils import create_admin_token, get_password_hash
from hostel_api.db import Base, enable_sqlite_foreign_keys, get_db
from hostel_api.main import app
from hostel_api.models import AdminUser, FoodCategory, FoodItem

ADMIN_PASSWORD = "secret123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    # no context manager: startup hooks would touch the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def admin_user(db):
    user = AdminUser(username="admin", password_hash=get_password_hash(ADMIN_PASSWORD))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def auth_headers(admin_user):
    return {"Authorization": f"Bearer {create_admin_token(admin_user)}"}


@pytest.fixture()
def food_items(db):
    items = [
        FoodItem(name="Bibimbap", price=Decimal("160.00"), category=FoodCategory.main, code="M4"),
        FoodItem(name="Mango Sticky Rice", price=Decimal("65.00"), category=FoodCategory.desserts, code="D3"),
        FoodItem(name="Lemon Ice Tea", price=Decimal("30.00"), category=FoodCategory.drinks, code="R2"),
    ]
    db.add_all(items)
    db.commit()
    for item in items:
        db.refresh(item)
    return items


@pytest.fixture()
def order_payload():
    def build(**overrides):
        payload = {
            "customer": "Jane Doe",
            "contactNumber": "+63 912 345 6789",
            "email": "jane@example.com",
            "address": "Room 12, Block B",
            "items": [{"name": "Pad Thai", "quantity": 2, "unitPrice": 10}],
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture()
def place_order(client, order_payload):
    """Place an order through the public checkout and return the response body"""
    def place(**overrides):
        response = client.post("/orders", json=order_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()
    return place
