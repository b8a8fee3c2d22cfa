# campus_order/services/dish_client.py
from typing import List

from campus_order.domain.errors import NotFoundError
from campus_order.domain.schemas import Dish
from campus_order.services.api_client import ApiClient


class DishClient(ApiClient):
    def fetch_dishes(self) -> List[Dish]:
        data = self.get("/dishes", error_message="Failed to fetch dishes")
        return [Dish.model_validate(d) for d in data]

    def fetch_dish_by_id(self, dish_id: str) -> Dish | None:
        try:
            data = self.get(
                f"/dishes/{dish_id}",
                error_message=f"Failed to fetch dish {dish_id}",
                not_found=f"Dish {dish_id} not found",
            )
        except NotFoundError:
            return None
        return Dish.model_validate(data)
