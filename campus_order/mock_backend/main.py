# campus_order/mock_backend/main.py
"""Backend w pamieci (dev mock) z tymi samymi endpointami co prawdziwy serwer."""
from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException, Query
import uvicorn

from campus_order.mock_backend.seed import seed
from campus_order.utils.settings import MOCK_BACKEND_HOST, MOCK_BACKEND_PORT

COLLECTIONS = ("dishes", "users", "favorites", "orders", "universities", "rooms")


def create_app(seed_data: bool = True) -> FastAPI:
    app = FastAPI(title="Campus Order Backend (dev mock)")

    db: Dict[str, List[Dict[str, Any]]] = {name: [] for name in COLLECTIONS}
    if seed_data:
        seed(db)
    app.state.db = db

    def _filter(collection: str, **filters) -> List[Dict[str, Any]]:
        return [
            row for row in db[collection]
            if all(value is None or str(row.get(key)) == str(value) for key, value in filters.items())
        ]

    def _get(collection: str, item_id: str) -> Dict[str, Any]:
        for row in db[collection]:
            if str(row.get("id")) == item_id:
                return row
        raise HTTPException(status_code=404, detail=f"{collection}/{item_id} not found")

    def _insert(collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        ids = [int(row["id"]) for row in db[collection] if str(row.get("id", "")).isdigit()]
        row = {**payload, "id": str(max(ids, default=0) + 1)}
        db[collection].append(row)
        return row

    @app.get("/dishes")
    def list_dishes():
        return db["dishes"]

    @app.get("/dishes/{dish_id}")
    def get_dish(dish_id: str):
        return _get("dishes", dish_id)

    @app.get("/users")
    def list_users(email: str | None = None):
        return _filter("users", email=email)

    @app.post("/users", status_code=201)
    def create_user(payload: Dict[str, Any] = Body(...)):
        return _insert("users", payload)

    @app.get("/favorites")
    def list_favorites(
        user_id: str | None = Query(None, alias="userId"),
        dish_id: str | None = Query(None, alias="dishId"),
    ):
        return _filter("favorites", userId=user_id, dishId=dish_id)

    @app.post("/favorites", status_code=201)
    def create_favorite(payload: Dict[str, Any] = Body(...)):
        return _insert("favorites", payload)

    @app.delete("/favorites/{favorite_id}")
    def delete_favorite(favorite_id: str):
        row = _get("favorites", favorite_id)
        db["favorites"].remove(row)
        return {}

    @app.get("/orders")
    def list_orders(user_id: str | None = Query(None, alias="userId")):
        return _filter("orders", userId=user_id)

    @app.post("/orders", status_code=201)
    def create_order(payload: Dict[str, Any] = Body(...)):
        return _insert("orders", payload)

    @app.get("/orders/{order_id}")
    def get_order(order_id: str):
        return _get("orders", order_id)

    @app.put("/orders/{order_id}")
    def replace_order(order_id: str, payload: Dict[str, Any] = Body(...)):
        row = _get("orders", order_id)
        row.clear()
        row.update({**payload, "id": order_id})
        return row

    @app.get("/universities")
    def list_universities():
        return db["universities"]

    @app.get("/rooms")
    def list_rooms(university_id: str | None = Query(None, alias="universityId")):
        return _filter("rooms", universityId=university_id)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=MOCK_BACKEND_HOST, port=MOCK_BACKEND_PORT)
