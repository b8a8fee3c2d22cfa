# campus_order/services/auth_service.py
from campus_order.domain.errors import InvalidCredentials
from campus_order.domain.schemas import Credentials, User
from campus_order.services.auth_client import AuthClient
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """Zalogowany uzytkownik biezacej sesji. Brak tokenow, tylko rekord z backendu."""

    def __init__(self, auth_client: AuthClient | None = None):
        self.auth_client = auth_client or AuthClient()
        self.user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, email: str, password: str) -> User:
        if not email or not password:
            raise InvalidCredentials("Email and password are required")

        self.user = self.auth_client.login_user(Credentials(email=email, password=password))
        logger.info(f"User {self.user.id} logged in")
        return self.user

    def register(self, email: str, password: str) -> User:
        if not email or not password:
            raise InvalidCredentials("Email and password are required")

        self.user = self.auth_client.register_user(Credentials(email=email, password=password))
        return self.user

    def logout(self) -> None:
        if self.user:
            logger.info(f"User {self.user.id} logged out")
        self.user = None
