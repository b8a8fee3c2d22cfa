# campus_order/services/order_service.py
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum

from pydantic import BaseModel, ConfigDict

from campus_order.domain.errors import ApiError, ValidationError
from campus_order.domain.schemas import Order, OrderRequest, User
from campus_order.services.cart_service import CartAggregate
from campus_order.services.order_client import OrderClient
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)

REASON_EMPTY_CART = "empty cart"
REASON_NO_LOCATION = "no delivery location"
REASON_UNAUTHENTICATED = "unauthenticated"

MESSAGES = {
    REASON_EMPTY_CART: "Your cart is empty. Add dishes before ordering.",
    REASON_NO_LOCATION: "Please select a delivery room.",
    REASON_UNAUTHENTICATED: "User not identified.",
}
FAILED_MESSAGE = "Something went wrong while placing your order. Please try again."
BUSY_MESSAGE = "Your order is already being placed."


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REJECTED = "rejected"


class SubmissionResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: SubmissionState
    message: str
    order: Order | None = None
    reason: str | None = None
    error: Exception | None = None


class SubmissionAttempt:
    """Jedna proba: zamrozony request + future wywolania backendu."""

    def __init__(self, request: OrderRequest, future: Future):
        self.request = request
        self.future = future

    def done(self) -> bool:
        return self.future.done()


class OrderSubmissionFlow:
    """
    Przejscie koszyk -> zamowienie.

    Idle -> Validating -> Rejected
    Idle -> Validating -> Submitting -> Succeeded | Failed

    Walidacja jest lokalna i synchroniczna. Wywolanie backendu idzie na
    jednowatkowy executor i dotyka tylko zamrozonego OrderRequest, koszyk
    zmieniany jest wylacznie w watku wywolujacym. Koszyk jest czyszczony
    tylko po potwierdzeniu z backendu, nigdy wczesniej.
    """

    def __init__(
        self,
        cart: CartAggregate,
        order_client: OrderClient | None = None,
        executor: Executor | None = None,
    ):
        self.cart = cart
        self.order_client = order_client or OrderClient()
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="order-submit")
        self._state = SubmissionState.IDLE
        self._attempt: SubmissionAttempt | None = None
        self._last_result: SubmissionResult | None = None
        self.delivery_location: str | None = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def last_result(self) -> SubmissionResult | None:
        return self._last_result

    @property
    def is_submitting(self) -> bool:
        return self._state == SubmissionState.SUBMITTING

    def select_delivery_location(self, location: str | None) -> None:
        self.delivery_location = location or None

    def _validate(self, user: User | None) -> None:
        #kolejnosc sprawdzen ma znaczenie
        if self.cart.is_empty:
            raise ValidationError(REASON_EMPTY_CART, MESSAGES[REASON_EMPTY_CART])

        if not self.delivery_location:
            raise ValidationError(REASON_NO_LOCATION, MESSAGES[REASON_NO_LOCATION])

        if user is None or not getattr(user, "id", None):
            raise ValidationError(REASON_UNAUTHENTICATED, MESSAGES[REASON_UNAUTHENTICATED])

    def _finish(self, result: SubmissionResult) -> SubmissionResult:
        self._attempt = None
        self._last_result = result
        self._state = SubmissionState.IDLE
        return result

    def submit(self, user: User | None) -> SubmissionAttempt | None:
        """
        Faza 1: walidacja, snapshot koszyka i wyslanie requestu.
        Rzuca ValidationError (bez wywolania backendu). Zwraca None gdy
        poprzednia proba wciaz trwa - ponowne submit jest ignorowane.
        """
        if self._state == SubmissionState.SUBMITTING:
            logger.warning("Order submission already in progress, ignoring submit")
            return None

        self._state = SubmissionState.VALIDATING
        try:
            self._validate(user)
        except ValidationError as e:
            logger.info(f"Order submission rejected: {e.reason}")
            self._finish(
                SubmissionResult(
                    state=SubmissionState.REJECTED,
                    message=e.message,
                    reason=e.reason,
                    error=e,
                )
            )
            raise

        snapshot = self.cart.snapshot()
        request = OrderRequest(
            user_id=user.id,
            lines=snapshot.lines,
            total_amount=snapshot.total_amount,
            delivery_location=self.delivery_location,
        )

        self._state = SubmissionState.SUBMITTING
        logger.info(
            f"Submitting order for user {request.user_id}: {len(request.lines)} lines, "
            f"total {request.total_amount}, deliver to {request.delivery_location}"
        )
        future = self._executor.submit(self.order_client.submit_request, request)
        self._attempt = SubmissionAttempt(request, future)
        return self._attempt

    def complete(self, attempt: SubmissionAttempt) -> Order:
        """
        Faza 2: czeka na odpowiedz backendu i wykonuje przejscie stanu.
        Sukces -> czyszczenie koszyka (dokladnie raz). NetworkError/ServerError
        sa rzucane dalej, koszyk zostaje nietkniety.
        """
        if attempt is not self._attempt:
            raise ValueError("Unknown or already completed submission attempt")

        try:
            order = attempt.future.result()
        except ApiError as e:
            logger.error(f"Order submission failed: {e}")
            self._finish(
                SubmissionResult(
                    state=SubmissionState.FAILED,
                    message=FAILED_MESSAGE,
                    error=e,
                )
            )
            raise
        except Exception:
            self._attempt = None
            self._state = SubmissionState.IDLE
            raise

        #czyscimy zywy koszyk, nie snapshot - zmiany z czasu wysylki tez znikaja
        self.cart.clear()
        logger.info(f"Order {order.id} accepted, cart cleared")
        self._finish(
            SubmissionResult(
                state=SubmissionState.SUCCEEDED,
                message=f"Your order will be delivered to {attempt.request.delivery_location}.",
                order=order,
            )
        )
        return order

    def place_order(self, user: User | None) -> SubmissionResult:
        """Obie fazy naraz, wynik zamiast wyjatku (dla warstwy UI)."""
        try:
            attempt = self.submit(user)
        except ValidationError:
            return self._last_result

        if attempt is None:
            return SubmissionResult(state=SubmissionState.SUBMITTING, message=BUSY_MESSAGE)

        try:
            self.complete(attempt)
        except ApiError as e:
            #wynik FAILED jest juz w last_result, koszyk zostaje do ponowienia
            logger.info(f"Order not placed ({e.error_code}), cart kept for retry")
        return self._last_result

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "OrderSubmissionFlow":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
