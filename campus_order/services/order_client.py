# campus_order/services/order_client.py
from decimal import Decimal
from typing import Iterable, List

from pydantic import ValidationError as PydanticValidationError

from campus_order.domain.errors import ServerError
from campus_order.domain.schemas import CartLine, Order, OrderRequest, OrderStatus, utc_now
from campus_order.services.api_client import ApiClient
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)


class OrderClient(ApiClient):
    def create_order(
        self,
        user_id: str,
        lines: Iterable[CartLine],
        total_amount: Decimal,
        delivery_location: str,
    ) -> Order:
        request = OrderRequest(
            user_id=user_id,
            lines=tuple(lines),
            total_amount=total_amount,
            delivery_location=delivery_location,
        )
        return self.submit_request(request)

    def submit_request(self, request: OrderRequest) -> Order:
        """
        POST /orders z zamrozonego snapshotu.
        Bez retry: powtorzony POST po timeoucie moglby utworzyc drugie zamowienie.
        """
        data = self.post(
            "/orders",
            json=request.to_payload(),
            retry=False,
            error_message="Failed to create order",
        )
        try:
            order = Order.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Failed to create order: malformed response ({e.error_count()} errors)")
            raise ServerError("Failed to create order") from e
        logger.info(
            f"Order {order.id} created for user {request.user_id}, "
            f"{len(request.lines)} lines, total {request.total_amount}"
        )
        return order

    def fetch_order_history(self, user_id: str | None = None) -> List[Order]:
        data = self.get(
            "/orders",
            params={"userId": user_id},
            error_message="Failed to fetch orders",
        )
        return [Order.model_validate(o) for o in data]

    def fetch_order_by_id(self, order_id: str) -> Order:
        data = self.get(
            f"/orders/{order_id}",
            error_message=f"Failed to fetch order {order_id}",
            not_found=f"Order {order_id} not found",
        )
        return Order.model_validate(data)

    def cancel_order(self, order_id: str) -> Order:
        #read-modify-write: pobierz, zmien status, odeslij calosc
        current = self.fetch_order_by_id(order_id)
        updated = current.model_copy(
            update={"status": OrderStatus.CANCELLED, "updated_at": utc_now()}
        )

        data = self.put(
            f"/orders/{order_id}",
            json=updated.to_payload(),
            error_message=f"Failed to cancel order {order_id}",
            not_found=f"Order {order_id} not found",
        )
        logger.info(f"Order {order_id} cancelled")
        return Order.model_validate(data)
