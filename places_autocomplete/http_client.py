# places_autocomplete/http_client.py
import logging
import time
import requests
from typing import Any, Dict

from .errors import InvalidCredentials, InvalidServerResponse, QuotaExceeded, redact_url

logger = logging.getLogger(__name__)


def quiet_transport_loggers() -> None:
    # urllib3 logs full request paths (with the key) at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class HttpClient:
    """
    Thin requests wrapper used as the transport for the providers.
    Connection errors and timeouts surface as the same requests exceptions with
    the key redacted; HTTP error statuses are mapped onto the package errors.
    """

    def __init__(self, timeout_sec: int, sleep_sec: float = 0.0):
        self.timeout_sec = timeout_sec
        self.sleep_sec = sleep_sec

    def get_text(self, url: str) -> str:
        logger.debug("GET %s", redact_url(url))
        resp = self._get(url, timeout=self.timeout_sec)
        if self.sleep_sec:
            time.sleep(self.sleep_sec)
        self._check_status(resp, url)

        body = resp.text
        if not body:
            raise InvalidServerResponse.empty_response(url)
        return body

    def get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("GET %s (%d params)", url, len(params))
        resp = self._get(url, params=params, timeout=self.timeout_sec)
        if self.sleep_sec:
            time.sleep(self.sleep_sec)
        self._check_status(resp, resp.url or url)
        try:
            return resp.json()
        except ValueError:
            raise InvalidServerResponse.create(resp.url or url)

    @staticmethod
    def _get(url: str, **kwargs: Any) -> requests.Response:
        try:
            return requests.get(url, **kwargs)
        except requests.RequestException as e:
            raise type(e)(redact_url(str(e))) from None

    @staticmethod
    def _check_status(resp: requests.Response, url: str) -> None:
        status = resp.status_code
        if status in (401, 403):
            raise InvalidCredentials("Request was rejected by the server (check the API key).")
        if status == 429:
            raise QuotaExceeded(f"Too many requests for {redact_url(url)}")
        if status >= 300:
            raise InvalidServerResponse.create(url, status)
