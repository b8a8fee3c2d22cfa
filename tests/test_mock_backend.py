from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from campus_order.domain.errors import InvalidCredentials, NotFoundError
from campus_order.domain.schemas import OrderStatus
from campus_order.mock_backend.main import create_app
from campus_order.mock_backend.seed import seed
from campus_order.services.auth_client import AuthClient
from campus_order.services.auth_service import AuthService
from campus_order.services.cart_service import CartAggregate
from campus_order.services.dish_client import DishClient
from campus_order.services.favorites_client import FavoritesClient
from campus_order.services.location_client import LocationClient
from campus_order.services.order_client import OrderClient
from campus_order.services.order_service import OrderSubmissionFlow, SubmissionState

BASE_URL = "http://testserver"


@pytest.fixture
def backend():
    return TestClient(create_app())


class TestMockBackendEndpoints:
    def test_dishes(self, backend):
        resp = backend.get("/dishes")

        assert resp.status_code == 200
        assert len(resp.json()) == 3
        assert backend.get("/dishes/999").status_code == 404

    def test_rooms_filtered_by_university(self, backend):
        rooms = backend.get("/rooms", params={"universityId": "uni2"}).json()

        assert [r["name"] for r in rooms] == ["Salle TP1", "Salle TP2"]

    def test_order_ids_are_assigned(self, backend):
        first = backend.post("/orders", json={"userId": "1"}).json()
        second = backend.post("/orders", json={"userId": "1"}).json()

        assert (first["id"], second["id"]) == ("1", "2")
        assert backend.put("/orders/77", json={}).status_code == 404

    def test_seed_does_not_overwrite(self):
        app = create_app()
        app.state.db["dishes"].append({"id": "x"})

        seed(app.state.db)

        assert app.state.db["dishes"][-1] == {"id": "x"}


class TestEndToEnd:
    """Klienci + flow przez prawdziwe endpointy FastAPI"""

    def test_order_lifecycle(self, backend):
        auth = AuthService(AuthClient(BASE_URL, session=backend))
        dishes = DishClient(BASE_URL, session=backend)
        orders = OrderClient(BASE_URL, session=backend)
        locations = LocationClient(BASE_URL, session=backend)

        user = auth.login("student@campus.test", "password123")
        menu = {d.id: d for d in dishes.fetch_dishes()}

        cart = CartAggregate()
        cart.add_dish(menu["1"])
        cart.add_dish(menu["1"])
        cart.add_dish(menu["2"])
        assert cart.total_amount == Decimal("30.97")

        with OrderSubmissionFlow(cart, orders) as flow:
            flow.select_delivery_location(locations.delivery_locations("uni1")[0])
            result = flow.place_order(auth.user)

        assert result.state == SubmissionState.SUCCEEDED
        assert cart.is_empty

        (order,) = orders.fetch_order_history(user.id)
        assert order.total_amount == Decimal("30.97")
        assert order.delivery_location == "Salle TD1"
        assert [(d.id, d.quantity) for d in order.dishes] == [("1", 2), ("2", 1)]
        assert order.status == OrderStatus.IN_PROGRESS

        cancelled = orders.cancel_order(order.id)
        assert cancelled.status == OrderStatus.CANCELLED
        assert orders.fetch_order_by_id(order.id).status == OrderStatus.CANCELLED

    def test_unknown_order(self, backend):
        with pytest.raises(NotFoundError):
            OrderClient(BASE_URL, session=backend).cancel_order("404")

    def test_register_then_login(self, backend):
        auth = AuthService(AuthClient(BASE_URL, session=backend))

        registered = auth.register("new@campus.test", "secret")
        auth.logout()

        assert auth.login("new@campus.test", "secret").id == registered.id
        with pytest.raises(InvalidCredentials):
            auth.login("new@campus.test", "wrong")

    def test_favorites_roundtrip(self, backend):
        favorites = FavoritesClient(BASE_URL, session=backend)

        first = favorites.add_to_favorites("1", "3")
        again = favorites.add_to_favorites("1", "3")
        assert first.id == again.id
        assert [d.name for d in favorites.get_favorites_by_user_id("1")] == ["Ratatouille"]

        favorites.remove_from_favorites("1", "3")
        favorites.remove_from_favorites("1", "3")
        assert favorites.check_is_favorite("1", "3") is False
