# campus_order/domain/cart.py
"""
Stan koszyka i czysty reducer.

Komendy (AddDish, RemoveDish, UpdateQuantity, ClearCart) sa wariantami
rozrozniamymi po polu `type`. reduce_cart(state, command) zwraca nowy
CartState i nigdy nie rzuca wyjatku, niepoprawne dane sa normalizowane
(ilosc <= 0 oznacza usuniecie linii).
"""
from decimal import Decimal
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from campus_order.domain.schemas import CartLine, Dish


class CartState(BaseModel):
    """Niemutowalny snapshot koszyka. Sumy zawsze wyliczane z linii."""

    model_config = ConfigDict(frozen=True)

    lines: Tuple[CartLine, ...] = ()
    total_amount: Decimal = Decimal("0.00")
    total_item_count: int = 0

    @classmethod
    def from_lines(cls, lines: Tuple[CartLine, ...]) -> "CartState":
        #pelne przeliczenie przy kazdej zmianie, bez inkrementalnego sumowania
        return cls(
            lines=lines,
            total_amount=sum((line.price * line.quantity for line in lines), Decimal("0.00")),
            total_item_count=sum(line.quantity for line in lines),
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find(self, dish_id: str) -> CartLine | None:
        return next((line for line in self.lines if line.id == dish_id), None)


EMPTY_CART = CartState()


class AddDish(BaseModel):
    type: Literal["ADD_DISH"] = "ADD_DISH"
    dish: Dish


class RemoveDish(BaseModel):
    type: Literal["REMOVE_DISH"] = "REMOVE_DISH"
    dish_id: str


class UpdateQuantity(BaseModel):
    type: Literal["UPDATE_QUANTITY"] = "UPDATE_QUANTITY"
    dish_id: str
    quantity: int


class ClearCart(BaseModel):
    type: Literal["CLEAR_CART"] = "CLEAR_CART"


CartCommand = Annotated[
    Union[AddDish, RemoveDish, UpdateQuantity, ClearCart],
    Field(discriminator="type"),
]


def _add_dish(state: CartState, dish: Dish) -> CartState:
    existing = state.find(dish.id)

    if existing:
        lines = tuple(
            line.model_copy(update={"quantity": line.quantity + 1}) if line.id == dish.id else line
            for line in state.lines
        )
    else:
        new_line = CartLine(**dish.model_dump(exclude={"quantity"}), quantity=1)
        lines = state.lines + (new_line,)

    return CartState.from_lines(lines)


def _remove_dish(state: CartState, dish_id: str) -> CartState:
    return CartState.from_lines(tuple(line for line in state.lines if line.id != dish_id))


def _update_quantity(state: CartState, dish_id: str, quantity: int) -> CartState:
    if quantity <= 0:
        return reduce_cart(state, RemoveDish(dish_id=dish_id))

    if not state.find(dish_id):
        return state

    lines = tuple(
        line.model_copy(update={"quantity": quantity}) if line.id == dish_id else line
        for line in state.lines
    )
    return CartState.from_lines(lines)


def reduce_cart(state: CartState, command: CartCommand) -> CartState:
    if isinstance(command, AddDish):
        return _add_dish(state, command.dish)

    if isinstance(command, RemoveDish):
        return _remove_dish(state, command.dish_id)

    if isinstance(command, UpdateQuantity):
        return _update_quantity(state, command.dish_id, command.quantity)

    if isinstance(command, ClearCart):
        return EMPTY_CART

    return state
