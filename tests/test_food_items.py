import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from hostel_api.CRUD import food_item_crud
from hostel_api.models import FoodItem


def test_list_is_public(client, food_items):
    response = client.get("/food-items")
    assert response.status_code == 200
    codes = {item["code"] for item in response.json()}
    assert codes == {"M4", "D3", "R2"}


def test_list_available_filter(client, db, food_items):
    food_items[0].available = False
    db.commit()

    response = client.get("/food-items", params={"available": "true"})
    assert {item["code"] for item in response.json()} == {"D3", "R2"}


def test_get_missing_item(client):
    response = client.get("/food-items/404")
    assert response.status_code == 404
    assert response.json() == {"error": "Food item not found"}


def test_create_item(client, auth_headers):
    response = client.post(
        "/food-items",
        json={"name": "Four Seasons", "price": "30", "category": "Drinks", "code": "R1"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Four Seasons"
    assert body["price"] == 30.0
    assert body["category"] == "drinks"
    assert body["available"] is True


def test_create_item_validation(client, auth_headers):
    response = client.post("/food-items", json={"name": "X", "price": -1}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Name must be at least 2 characters; Price must be a positive number"}


def test_create_item_unknown_category(client, auth_headers):
    response = client.post(
        "/food-items", json={"name": "Soup", "price": 40, "category": "soups"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid category 'soups'")


def test_create_item_code_taken_ignoring_case(client, auth_headers, food_items):
    response = client.post(
        "/food-items", json={"name": "Another Bowl", "price": 99, "code": "m4"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Code already exists"}


def test_patch_applies_only_given_fields(client, auth_headers, food_items):
    item = food_items[0]
    response = client.patch(f"/food-items/{item.id}", json={"price": 175.5}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 175.5
    assert body["name"] == "Bibimbap"
    assert body["code"] == "M4"


def test_patch_same_code_different_case_is_allowed(client, auth_headers, food_items):
    item = food_items[0]
    response = client.patch(f"/food-items/{item.id}", json={"code": "m4"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["code"] == "m4"


def test_patch_code_conflict_leaves_record_unchanged(client, db, auth_headers, food_items):
    item = food_items[0]
    response = client.patch(
        f"/food-items/{item.id}",
        json={"code": "d3", "name": "Renamed Bowl", "price": 1},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Code already exists"}

    db.expire_all()
    stored = db.get(FoodItem, item.id)
    assert stored.code == "M4"
    assert stored.name == "Bibimbap"
    assert float(stored.price) == 160.0


def test_patch_invalid_price(client, auth_headers, food_items):
    item = food_items[0]
    for price in ("abc", -5):
        response = client.patch(f"/food-items/{item.id}", json={"price": price}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid price value"}


def test_patch_missing_item(client, auth_headers):
    response = client.patch("/food-items/999", json={"name": "Ghost"}, headers=auth_headers)
    assert response.status_code == 404


def test_delete_item(client, db, auth_headers, food_items):
    item_id = food_items[2].id
    response = client.delete(f"/food-items/{item_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "id": item_id}

    db.expire_all()
    assert db.get(FoodItem, item_id) is None
    assert client.delete(f"/food-items/{item_id}", headers=auth_headers).status_code == 404


def test_delete_keeps_order_line_snapshot(client, db, auth_headers, food_items, place_order):
    item = food_items[1]
    order = place_order(items=[
        {"foodId": item.id, "name": item.name, "quantity": 1, "unitPrice": 65},
    ])

    assert client.delete(f"/food-items/{item.id}", headers=auth_headers).status_code == 200

    response = client.get(f"/orders/{order['id']}", headers=auth_headers)
    line = response.json()["items"][0]
    assert line["foodId"] is None
    assert line["name"] == "Mango Sticky Rice"
    assert line["unitPrice"] == 65.0


def test_late_code_collision_maps_to_code_exists(db, food_items):
    # skips the pre-check, the unique index rejects the row on commit
    item = FoodItem(name="Another Bowl", price=99, code="m4")
    db.add(item)
    with pytest.raises(HTTPException) as excinfo:
        food_item_crud._commit_or_code_conflict(db, item)
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "Code already exists"


def test_other_integrity_errors_are_not_code_conflicts(db):
    item = FoodItem(name="Priceless", price=None, code="X1")
    db.add(item)
    with pytest.raises(IntegrityError):
        food_item_crud._commit_or_code_conflict(db, item)
    assert db.query(FoodItem).count() == 0
