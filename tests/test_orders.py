import json

import pytest

from hostel_api.models import AuditLog, Order, OrderItem


def test_checkout_is_public_and_totals_lines(client, place_order):
    order = place_order(items=[
        {"name": "Pad Thai", "quantity": 2, "unitPrice": 10},
        {"name": "Iced Tea", "quantity": 3, "unitPrice": 2.5, "notes": "less sugar"},
    ])
    assert order["status"] == "PENDING"
    assert order["archived"] is False
    assert order["orderType"] == "DELIVERY"
    assert order["uid"] == f"ORD{order['id']:06d}"
    assert order["total"] == 27.5
    assert [line["lineTotal"] for line in order["items"]] == [20.0, 7.5]
    assert order["items"][1]["notes"] == "less sugar"


def test_checkout_with_requested_time(client, place_order):
    order = place_order(date="2025-03-01", time="18:30", orderType="PICKUP")
    assert order["desiredAt"] == "2025-03-01T18:30:00"
    assert order["orderType"] == "PICKUP"


def test_checkout_validation_errors(client, order_payload):
    response = client.post("/orders", json=order_payload(items=[], email="nope"))
    assert response.status_code == 400
    assert response.json() == {"error": "At least one item is required; Invalid email format"}


def test_checkout_rejects_bad_quantity(client, order_payload):
    payload = order_payload(items=[{"name": "Pad Thai", "quantity": 0, "unitPrice": 10}])
    response = client.post("/orders", json=payload)
    assert response.status_code == 400
    assert "quantity" in response.json()["error"]


def test_checkout_rejects_unknown_food(client, db, order_payload):
    payload = order_payload(items=[{"foodId": 4242, "name": "Ghost", "quantity": 1, "unitPrice": 1}])
    response = client.post("/orders", json=payload)
    assert response.status_code == 400
    assert "4242" in response.json()["error"]
    assert db.query(Order).count() == 0


def test_list_orders_newest_first_with_archive_filter(client, auth_headers, place_order):
    first = place_order()
    second = place_order()
    client.patch(f"/orders/{first['id']}", json={"archived": True}, headers=auth_headers)

    all_orders = client.get("/orders", headers=auth_headers).json()
    assert [o["id"] for o in all_orders] == [second["id"], first["id"]]

    active = client.get("/orders", params={"archived": "false"}, headers=auth_headers).json()
    assert [o["id"] for o in active] == [second["id"]]

    archived = client.get("/orders", params={"archived": "true"}, headers=auth_headers).json()
    assert [o["id"] for o in archived] == [first["id"]]
    assert archived[0]["archivedAt"] is not None


def test_get_order_bad_ids(client, auth_headers):
    response = client.get("/orders/abc", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid order ID"}

    response = client.get("/orders/77", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Order not found"}


def test_update_status_and_restore(client, auth_headers, place_order):
    order = place_order()
    response = client.patch(
        f"/orders/{order['id']}", json={"status": "ACCEPTED", "archived": True}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "ACCEPTED"
    assert response.json()["archived"] is True

    response = client.patch(f"/orders/{order['id']}", json={"archived": False}, headers=auth_headers)
    assert response.json()["archived"] is False
    assert response.json()["archivedAt"] is None


def test_update_rejects_unknown_status(client, auth_headers, place_order):
    order = place_order()
    response = client.patch(f"/orders/{order['id']}", json={"status": "LOST"}, headers=auth_headers)
    assert response.status_code == 400


def test_update_contact_validation(client, auth_headers, place_order):
    order = place_order()
    response = client.patch(f"/orders/{order['id']}", json={"email": "broken"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid email format"}


def test_replace_items_recomputes_total(client, auth_headers, place_order):
    order = place_order(items=[
        {"name": "Pad Thai", "quantity": 2, "unitPrice": 10},
        {"name": "Iced Tea", "quantity": 1, "unitPrice": 3},
    ])
    kept = order["items"][0]

    response = client.patch(
        f"/orders/{order['id']}",
        json={"items": [
            {"id": kept["id"], "name": "Pad Thai", "quantity": 3, "unitPrice": 10},
            {"name": "Spring Rolls", "quantity": 1, "unitPrice": 4.25},
        ]},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert [line["name"] for line in body["items"]] == ["Pad Thai", "Spring Rolls"]
    assert body["items"][0]["id"] == kept["id"]
    assert body["items"][0]["lineTotal"] == 30.0
    assert body["total"] == 34.25


def test_clear_items_keeps_order(client, db, auth_headers, place_order):
    order = place_order()
    response = client.delete(f"/orders/{order['id']}/items", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Order items deleted", "orderId": order["id"]}

    fetched = client.get(f"/orders/{order['id']}", headers=auth_headers).json()
    assert fetched["items"] == []
    assert fetched["total"] == 0.0
    assert fetched["customer"] == "Jane Doe"
    assert db.query(OrderItem).count() == 0


def test_cancel_pending_order(client, auth_headers, place_order):
    order = place_order()
    response = client.delete(f"/orders/{order['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Order cancelled and archived"

    fetched = client.get(f"/orders/{order['id']}", headers=auth_headers).json()
    assert fetched["status"] == "CANCELLED"
    assert fetched["archived"] is True


@pytest.mark.parametrize("locked_status", ["ACCEPTED", "COMPLETED"])
def test_cancel_refused_once_accepted(client, auth_headers, place_order, locked_status):
    order = place_order()
    client.patch(f"/orders/{order['id']}", json={"status": locked_status}, headers=auth_headers)

    response = client.delete(f"/orders/{order['id']}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete orders that have been accepted or completed"}

    fetched = client.get(f"/orders/{order['id']}", headers=auth_headers).json()
    assert fetched["status"] == locked_status
    assert fetched["archived"] is False


def test_permanent_delete_writes_audit_log(client, db, admin_user, auth_headers, place_order):
    order = place_order()
    response = client.delete(f"/orders/{order['id']}/permanent", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Order permanently deleted and logged", "orderId": order["id"]}

    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0

    entry = db.query(AuditLog).one()
    assert entry.action == "DELETE"
    assert entry.table_name == "order"
    assert entry.record_id == str(order["id"])
    assert entry.user_id == admin_user.id
    details = json.loads(entry.details)
    assert details["customer"] == "Jane Doe"
    assert details["total"] == 20.0
    assert details["itemsCount"] == 1


def test_permanent_delete_bad_ids(client, db, auth_headers):
    response = client.delete("/orders/abc/permanent", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid order ID"}

    response = client.delete("/orders/12/permanent", headers=auth_headers)
    assert response.status_code == 404
    assert db.query(AuditLog).count() == 0


def test_replace_items_rejects_repeated_line_id(client, db, auth_headers, place_order):
    order = place_order()
    line_id = order["items"][0]["id"]

    response = client.patch(
        f"/orders/{order['id']}",
        json={"items": [
            {"id": line_id, "name": "Pad Thai", "quantity": 1, "unitPrice": 10},
            {"id": line_id, "name": "Pad Thai", "quantity": 1, "unitPrice": 10},
        ]},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Duplicate order item ID"}

    fetched = client.get(f"/orders/{order['id']}", headers=auth_headers).json()
    assert fetched["total"] == sum(line["lineTotal"] for line in fetched["items"]) == 20.0
    assert db.query(OrderItem).count() == 1
