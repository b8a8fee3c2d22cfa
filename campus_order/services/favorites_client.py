# campus_order/services/favorites_client.py
from typing import List

from campus_order.domain.schemas import Dish, Favorite
from campus_order.services.api_client import ApiClient
from campus_order.services.dish_client import DishClient
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)


class FavoritesClient(ApiClient):
    """Ulubione dania, klucz (user_id, dish_id). Dodawanie i usuwanie sa idempotentne."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None, session=None,
                 dish_client: DishClient | None = None):
        super().__init__(base_url=base_url, timeout=timeout, session=session)
        self.dish_client = dish_client or DishClient(self.base_url, self.timeout, self.session)

    def _find(self, user_id: str, dish_id: str) -> List[Favorite]:
        data = self.get(
            "/favorites",
            params={"userId": user_id, "dishId": dish_id},
            error_message="Failed to look up favorite",
        )
        return [Favorite.model_validate(f) for f in data]

    def get_favorites_by_user_id(self, user_id: str) -> List[Dish]:
        data = self.get(
            "/favorites",
            params={"userId": user_id},
            error_message="Failed to fetch favorites",
        )

        dishes = []
        for fav in (Favorite.model_validate(f) for f in data):
            dish = self.dish_client.fetch_dish_by_id(fav.dish_id)
            #danie moglo zniknac z katalogu
            if dish is not None:
                dishes.append(dish)
        return dishes

    def add_to_favorites(self, user_id: str, dish_id: str) -> Favorite:
        existing = self._find(user_id, dish_id)
        if existing:
            return existing[0]

        created = self.post(
            "/favorites",
            json={"userId": user_id, "dishId": dish_id},
            retry=False,
            error_message="Failed to add favorite",
        )
        logger.info(f"Dish {dish_id} added to favorites of user {user_id}")
        return Favorite.model_validate(created)

    def remove_from_favorites(self, user_id: str, dish_id: str) -> None:
        existing = self._find(user_id, dish_id)
        if not existing:
            return

        self.delete(
            f"/favorites/{existing[0].id}",
            error_message="Failed to remove favorite",
        )
        logger.info(f"Dish {dish_id} removed from favorites of user {user_id}")

    def check_is_favorite(self, user_id: str, dish_id: str) -> bool:
        return bool(self._find(user_id, dish_id))
