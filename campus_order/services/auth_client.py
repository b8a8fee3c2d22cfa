# campus_order/services/auth_client.py
from campus_order.domain.errors import EmailAlreadyUsed, InvalidCredentials
from campus_order.domain.schemas import Credentials, User
from campus_order.services.api_client import ApiClient
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)


class AuthClient(ApiClient):
    """
    Backend nie ma endpointu logowania, haslo jest porownywane po stronie klienta
    z rekordem z GET /users?email=. Zwracany User nigdy nie zawiera hasla.
    """

    def _find_users(self, email: str) -> list:
        return self.get(
            "/users",
            params={"email": email},
            error_message="Failed to look up user",
        )

    def login_user(self, credentials: Credentials) -> User:
        users = self._find_users(credentials.email)

        if not users or users[0].get("password") != credentials.password:
            logger.warning(f"Login rejected for {credentials.email}")
            raise InvalidCredentials("Incorrect email or password")

        return User.model_validate(users[0])

    def register_user(self, credentials: Credentials) -> User:
        if self._find_users(credentials.email):
            raise EmailAlreadyUsed("This email is already in use")

        created = self.post(
            "/users",
            json=credentials.model_dump(),
            retry=False,
            error_message="Failed to create account",
        )
        logger.info(f"Registered user {created.get('id')} ({credentials.email})")
        return User.model_validate(created)
