"""Integration tests for the Orders API

Tests cover:
- Order creation and the validation pipeline over HTTP
- Error body shape and status codes per error kind
- SHIPPED order guards on PUT, PATCH and DELETE
- Authentication requirement
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.orders.status import OrderStatus
from models.order import Order
from models.user import User


pytestmark = pytest.mark.integration

ORDERS = "/api/v1/orders"


def order_payload(user_id, amount=500.0, payment=None, **overrides):
    data = {
        "user_id": user_id,
        "product_name": "Laptop",
        "amount": amount,
        "start_date": "2026-01-01",
        "end_date": "2026-01-31",
        "payment": payment or {"payment_type": "CREDIT_CARD", "card_number": "1234567890123456"},
    }
    data.update(overrides)
    return data


class TestCreateOrder:
    """Test POST /orders"""

    def test_create_order(self, user_client: TestClient, customer: User, db_session: Session):
        response = user_client.post(ORDERS, json=order_payload(customer.id))

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "CREATED"
        assert data["user_id"] == customer.id
        assert data["payment_type"] == "CREDIT_CARD"
        assert data["card_number"] == "************3456"
        assert db_session.get(Order, data["id"]) is not None

    def test_credit_limit_exceeded(self, user_client: TestClient, user_factory):
        poor = user_factory(email="poor@test.com", credit_limit=500.0)

        response = user_client.post(ORDERS, json=order_payload(poor.id, amount=600.0))

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Credit limit exceeded"
        assert body["error"] == "UNPROCESSABLE_ENTITY"
        assert body["path"] == ORDERS
        assert body["validation_errors"] is None

    def test_blocked_user(self, user_client: TestClient, blocked_user: User):
        response = user_client.post(ORDERS, json=order_payload(blocked_user.id, amount=100.0))

        assert response.status_code == 403
        assert response.json()["message"] == "Blocked users cannot place orders"

    def test_card_number_required(self, user_client: TestClient, customer: User):
        payload = order_payload(customer.id, payment={"payment_type": "CREDIT_CARD", "card_number": None})

        response = user_client.post(ORDERS, json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Card number required"
        assert body["validation_errors"] == {"card_number": "Card number required"}

    def test_unknown_user(self, user_client: TestClient):
        response = user_client.post(ORDERS, json=order_payload(9999))

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_cash_order_needs_no_card(self, user_client: TestClient, customer: User):
        payload = order_payload(customer.id, payment={"payment_type": "CASH"})

        response = user_client.post(ORDERS, json=payload)

        assert response.status_code == 201
        assert response.json()["card_number"] is None

    @pytest.mark.parametrize("overrides,field", [
        ({"amount": 0}, "amount"),
        ({"product_name": ""}, "product_name"),
        ({"payment": {"payment_type": "BITCOIN"}}, "payment.payment_type"),
        ({"payment": {"payment_type": "CREDIT_CARD", "card_number": "1234"}}, "payment.card_number"),
    ])
    def test_schema_violations_are_400(self, user_client: TestClient, customer: User, overrides, field):
        response = user_client.post(ORDERS, json=order_payload(customer.id, **overrides))

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert field in body["validation_errors"]

    def test_requires_authentication(self, client: TestClient, customer: User):
        response = client.post(ORDERS, json=order_payload(customer.id))

        assert response.status_code in (401, 403)

    def test_request_id_echoed(self, user_client: TestClient, customer: User):
        response = user_client.post(
            ORDERS,
            json=order_payload(customer.id, amount=5000.0),
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"
        assert response.json()["trace_id"] == "req-123"


class TestGetOrder:
    """Test GET /orders/{id}"""

    def test_get_order(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer)

        response = user_client.get(f"{ORDERS}/{order.id}")

        assert response.status_code == 200
        assert response.json()["product_name"] == "Laptop"

    def test_missing_order(self, user_client: TestClient):
        response = user_client.get(f"{ORDERS}/424242")

        assert response.status_code == 404
        assert response.json()["message"] == "Order not found"


class TestUpdateOrder:
    """Test PUT /orders/{id}"""

    def test_update_order(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer)

        response = user_client.put(
            f"{ORDERS}/{order.id}",
            json=order_payload(customer.id, amount=800.0, product_name="Phone"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["product_name"] == "Phone"
        assert data["amount"] == 800.0
        assert data["status"] == "CREATED"
        assert data["payment_type"] == "CASH"

    def test_shipped_order_cannot_be_updated(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer, status=OrderStatus.SHIPPED)

        response = user_client.put(f"{ORDERS}/{order.id}", json=order_payload(customer.id))

        assert response.status_code == 409
        assert response.json()["message"] == "Cannot update shipped order"

    def test_update_over_credit_limit(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer)

        response = user_client.put(f"{ORDERS}/{order.id}", json=order_payload(customer.id, amount=1500.0))

        assert response.status_code == 422


class TestPatchOrder:
    """Test PATCH /orders/{id}"""

    def test_patch_status(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer)

        response = user_client.patch(f"{ORDERS}/{order.id}", json={"status": "SHIPPED"})

        assert response.status_code == 200
        assert response.json()["status"] == "SHIPPED"

    def test_cannot_cancel_after_shipment(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer, status=OrderStatus.SHIPPED)

        response = user_client.patch(f"{ORDERS}/{order.id}", json={"status": "CANCELLED"})

        assert response.status_code == 422
        assert response.json()["message"] == "Cannot cancel after shipment"

    def test_invalid_status_is_400(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer)

        response = user_client.patch(f"{ORDERS}/{order.id}", json={"status": "LOST"})

        assert response.status_code == 400
        assert "status" in response.json()["validation_errors"]

    def test_partial_failure_changes_nothing(
        self, user_client: TestClient, customer: User, order_factory, db_session: Session
    ):
        order = order_factory(customer)

        response = user_client.patch(f"{ORDERS}/{order.id}", json={"status": "SHIPPED", "amount": "abc"})

        assert response.status_code == 400
        db_session.expire_all()
        assert db_session.get(Order, order.id).status == OrderStatus.CREATED

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "1e400"])
    def test_non_finite_amount_is_400(self, user_client: TestClient, customer: User, order_factory, amount):
        order = order_factory(customer)

        response = user_client.patch(f"{ORDERS}/{order.id}", json={"amount": amount})

        assert response.status_code == 400
        assert "amount" in response.json()["validation_errors"]
        assert user_client.get(f"{ORDERS}/{order.id}").json()["amount"] == 500.0

    def test_other_fields_ignored(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer)

        response = user_client.patch(f"{ORDERS}/{order.id}", json={"product_name": "Other", "amount": 42})

        assert response.status_code == 200
        assert response.json()["product_name"] == "Laptop"
        assert response.json()["amount"] == 42.0


class TestDeleteOrder:
    """Test DELETE /orders/{id}"""

    def test_delete_order(self, user_client: TestClient, customer: User, order_factory, db_session: Session):
        order = order_factory(customer)
        order_id = order.id

        response = user_client.delete(f"{ORDERS}/{order_id}")

        assert response.status_code == 204
        db_session.expire_all()
        assert db_session.get(Order, order_id) is None

    def test_shipped_order_cannot_be_deleted(self, user_client: TestClient, customer: User, order_factory):
        order = order_factory(customer, status=OrderStatus.SHIPPED)

        response = user_client.delete(f"{ORDERS}/{order.id}")

        assert response.status_code == 409
        assert response.json()["message"] == "Cannot delete shipped order"

    def test_delete_missing_order(self, user_client: TestClient):
        response = user_client.delete(f"{ORDERS}/999")

        assert response.status_code == 404
