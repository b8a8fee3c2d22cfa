# campus_order/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, field_serializer, field_validator
from typing import Any, Dict, Tuple
from decimal import Decimal
from datetime import datetime, timezone
from enum import Enum


def _money(value: Any) -> Any:
    #float z JSONa przez str, zeby 10.99 zostalo Decimal("10.99")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def iso_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WireModel(BaseModel):
    """Baza dla modeli z backendu: camelCase na drucie, id liczbowe zamieniane na str."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class OrderStatus(str, Enum):
    IN_PROGRESS = "en cours"
    CANCELLED = "annulée"
    COMPLETED = "terminée"


class Dish(WireModel):
    """Danie z katalogu (tylko do odczytu)."""

    id: str
    name: str
    description: str = ""
    price: Decimal = Field(..., ge=0)
    image: str = ""
    allergens: Tuple[str, ...] = ()

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Any:
        return _money(value)

    @field_serializer("price", when_used="json")
    def _dump_price(self, value: Decimal) -> float:
        return float(value)


class CartLine(Dish):
    """Danie + ilosc. Tozsamosc linii = id dania."""

    quantity: int = Field(1, ge=1)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


class User(WireModel):
    # haslo z backendu jest ignorowane przy parsowaniu
    id: str
    email: str
    name: str | None = None


class Credentials(BaseModel):
    email: str = Field(..., description="Adres email uzytkownika")
    password: str = Field(..., description="Haslo w postaci jawnej, backend jest stubem")


class Favorite(WireModel):
    id: str
    user_id: str = Field(..., alias="userId")
    dish_id: str = Field(..., alias="dishId")


class University(WireModel):
    id: str
    name: str


class Room(WireModel):
    id: str
    name: str
    building: str | None = None
    university_id: str | None = Field(None, alias="universityId")


class OrderRequest(WireModel):
    """
    Zamrozony snapshot koszyka wysylany do POST /orders.
    Tworzony raz na probe zlozenia zamowienia i nigdy nie modyfikowany.
    """

    user_id: str
    lines: Tuple[CartLine, ...]
    total_amount: Decimal
    delivery_location: str
    created_at: datetime = Field(default_factory=utc_now)

    def to_payload(self) -> Dict[str, Any]:
        created = iso_timestamp(self.created_at)
        return {
            "userId": self.user_id,
            "dishes": [
                line.model_dump(mode="json", exclude={"allergens"})
                for line in self.lines
            ],
            "totalAmount": float(self.total_amount),
            "status": OrderStatus.IN_PROGRESS.value,
            "deliveryLocation": self.delivery_location,
            "createdAt": created,
            "updatedAt": created,
        }


class Order(WireModel):
    """Zamowienie zwrocone przez backend."""

    id: str
    user_id: str = Field(..., alias="userId")
    # stare zamowienia jednodaniowe nie maja quantity, CartLine daje domyslnie 1
    dishes: Tuple[CartLine, ...] = ()
    total_amount: Decimal = Field(..., alias="totalAmount")
    status: OrderStatus = OrderStatus.IN_PROGRESS
    delivery_location: str = Field(..., alias="deliveryLocation")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_validator("total_amount", mode="before")
    @classmethod
    def _parse_total(cls, value: Any) -> Any:
        return _money(value)

    @field_serializer("total_amount", when_used="json")
    def _dump_total(self, value: Decimal) -> float:
        return float(value)

    @field_serializer("created_at", "updated_at", when_used="json")
    def _dump_timestamp(self, value: datetime) -> str:
        return iso_timestamp(value)

    @property
    def is_cancellable(self) -> bool:
        return self.status == OrderStatus.IN_PROGRESS

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
