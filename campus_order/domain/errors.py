# campus_order/domain/errors.py
"""
Wyjatki aplikacji.

ValidationError - lokalny warunek niespelniony, nigdy nie dochodzi do sieci
ApiError i potomne - bledy wspolpracownikow HTTP
AuthenticationError i potomne - logowanie / rejestracja
"""
from typing import Any, Dict


class CampusOrderError(Exception):
    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: Dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CampusOrderError):
    """Odrzucenie zamowienia przed wyslaniem (pusty koszyk, brak sali, brak usera)."""

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason
        super().__init__(message or reason, details={"reason": reason})


class ApiError(CampusOrderError):
    def __init__(self, message: str, status: int | None = None, details: Dict[str, Any] | None = None):
        self.status = status
        super().__init__(message, details=details)


class NetworkError(ApiError):
    """Blad transportu (timeout, brak polaczenia)."""


class ServerError(ApiError):
    """Odpowiedz spoza 2xx albo 2xx z nieczytelnym cialem."""


class NotFoundError(ApiError):
    """Encja nie istnieje (404)."""


class ConflictError(ApiError):
    # zarezerwowane pod wykrywanie zduplikowanych zamowien
    pass


class AuthenticationError(CampusOrderError):
    pass


class InvalidCredentials(AuthenticationError):
    pass


class EmailAlreadyUsed(AuthenticationError):
    pass
