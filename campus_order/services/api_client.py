# campus_order/services/api_client.py
import requests
from requests import RequestException
from typing import Any

from campus_order.domain.errors import NetworkError, NotFoundError, ServerError
from campus_order.utils.retry import http_retry
from campus_order.utils.settings import API_URL, HTTP_TIMEOUT_SECONDS
from campus_order.utils.logging import get_logger

logger = get_logger(__name__)


class ApiClient:
    """
    Wspolna baza dla klientow REST backendu.
    - bledy transportu -> NetworkError
    - 404 tam gdzie odwolujemy sie do encji -> NotFoundError
    - inne statusy spoza 2xx -> ServerError
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None, session=None):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.timeout = timeout or HTTP_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def _send_once(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        logger.info(f"{self.__class__.__name__} {method} {url}")
        return self.session.request(method, url, timeout=self.timeout, **kwargs)

    @http_retry()
    def _send(self, method: str, path: str, **kwargs) -> Any:
        return self._send_once(method, path, **kwargs)

    def _request(
        self,
        method: str,
        path: str,
        *,
        error_message: str,
        retry: bool = True,
        not_found: str | None = None,
        params: dict | None = None,
        json: Any = None,
    ) -> Any:
        kwargs = {}
        params = {k: v for k, v in (params or {}).items() if v is not None}
        if params:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json

        send = self._send if retry else self._send_once
        try:
            resp = send(method, path, **kwargs)
        except RequestException as e:
            logger.error(f"{error_message}: {e}")
            raise NetworkError(error_message) from e

        if resp.status_code == 404 and not_found:
            logger.warning(f"{not_found} ({method} {path})")
            raise NotFoundError(not_found, status=404)

        if not 200 <= resp.status_code < 300:
            logger.error(f"{error_message}: HTTP {resp.status_code}")
            raise ServerError(error_message, status=resp.status_code)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            #2xx z cialem, ktore nie jest JSON-em (np. strona bledu proxy)
            logger.error(f"{error_message}: invalid JSON body (HTTP {resp.status_code})")
            raise ServerError(error_message, status=resp.status_code) from e

    def get(self, path: str, **kwargs) -> Any:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self._request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Any:
        return self._request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self._request("DELETE", path, **kwargs)
