import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from campus_order.domain.schemas import Dish, Order, User
from campus_order.services.cart_service import CartAggregate
from campus_order.services.order_service import OrderSubmissionFlow

API_URL = "http://api.test"


def make_response(status_code=200, payload=None):
    """Minimalna odpowiedz HTTP dla MagicMock sesji requests."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = b"" if payload is None else json.dumps(payload).encode()
    resp.json.return_value = payload
    return resp


class FakeOrderClient:
    """Zapisuje wyslane requesty; opcjonalnie blokuje na `gate` albo rzuca `error`."""

    def __init__(self):
        self.requests = []
        self.error = None
        self.gate = None

    def submit_request(self, request):
        if self.gate is not None:
            self.gate.wait(timeout=5)
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return Order(
            id=str(len(self.requests)),
            user_id=request.user_id,
            dishes=request.lines,
            total_amount=request.total_amount,
            delivery_location=request.delivery_location,
            created_at=request.created_at,
            updated_at=request.created_at,
        )


@pytest.fixture
def dish_a():
    return Dish(
        id="A",
        name="Dish A",
        description="Delicious dish",
        price=Decimal("10.99"),
        image="a.jpg",
        allergens=["gluten"],
    )


@pytest.fixture
def dish_b():
    return Dish(
        id="B",
        name="Dish B",
        description="Tasty dish",
        price=Decimal("8.99"),
        image="b.jpg",
        allergens=["lactose"],
    )


@pytest.fixture
def dish_c():
    return Dish(id="C", name="Dish C", price=Decimal("4.50"))


@pytest.fixture
def user():
    return User(id="user5", email="test@example.com", name="Test User")


@pytest.fixture
def cart():
    return CartAggregate()


@pytest.fixture
def two_line_cart(cart, dish_a, dish_b):
    # A x2 + B x1 = 30.97
    cart.add_dish(dish_a)
    cart.add_dish(dish_a)
    cart.add_dish(dish_b)
    return cart


@pytest.fixture
def order_client():
    return FakeOrderClient()


@pytest.fixture
def flow(cart, order_client):
    f = OrderSubmissionFlow(cart, order_client)
    yield f
    if order_client.gate is not None:
        order_client.gate.set()
    f.close()


@pytest.fixture
def session():
    return MagicMock()
