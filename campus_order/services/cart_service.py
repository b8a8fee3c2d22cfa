# campus_order/services/cart_service.py
from decimal import Decimal
from typing import Tuple

from campus_order.domain.cart import (
    EMPTY_CART,
    AddDish,
    CartCommand,
    CartState,
    ClearCart,
    RemoveDish,
    UpdateQuantity,
    reduce_cart,
)
from campus_order.domain.schemas import CartLine, Dish
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)


class CartAggregate:
    """
    Koszyk nalezacy do jednej sesji uzytkownika.
    commands (add, remove, update, clear) przechodza przez reduce_cart
    query (totals, lines, ...) tylko odczyt aktualnego snapshotu
    Operacje nigdy nie rzucaja wyjatkow.
    """

    def __init__(self, state: CartState = EMPTY_CART):
        self._state = state

    #commands
    def dispatch(self, command: CartCommand) -> CartState:
        self._state = reduce_cart(self._state, command)
        logger.debug(
            f"{command.type}: {len(self._state.lines)} lines, "
            f"{self._state.total_item_count} items, total {self._state.total_amount}"
        )
        return self._state

    def add_dish(self, dish: Dish) -> CartState:
        return self.dispatch(AddDish(dish=dish))

    def remove_dish(self, dish_id: str) -> CartState:
        return self.dispatch(RemoveDish(dish_id=dish_id))

    def update_quantity(self, dish_id: str, quantity: int) -> CartState:
        return self.dispatch(UpdateQuantity(dish_id=dish_id, quantity=quantity))

    def step_quantity(self, dish_id: str, delta: int) -> CartState:
        """Przycisk +/- w koszyku: nie schodzi ponizej 1, usuwanie tylko przez remove_dish."""
        new_quantity = self.quantity_of(dish_id) + delta
        if new_quantity < 1:
            return self._state
        return self.update_quantity(dish_id, new_quantity)

    def clear(self) -> CartState:
        logger.info("Cart cleared")
        return self.dispatch(ClearCart())

    #query
    def snapshot(self) -> CartState:
        return self._state

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return self._state.lines

    @property
    def total_amount(self) -> Decimal:
        return self._state.total_amount

    @property
    def total_item_count(self) -> int:
        return self._state.total_item_count

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    def contains_dish(self, dish_id: str) -> bool:
        return self._state.find(dish_id) is not None

    def quantity_of(self, dish_id: str) -> int:
        line = self._state.find(dish_id)
        return line.quantity if line else 0
