import logging
from typing import Any, Dict
from urllib.parse import quote

import requests

from marketmind.config import Settings
from marketmind.exceptions import GatewayError

logger = logging.getLogger(__name__)


class CashfreeClient:
    """Thin wrapper over the Cashfree PG orders API."""

    def __init__(self, settings: Settings):
        self.base_url = settings.api_base
        self.timeout = settings.gateway_timeout
        self.headers = {
            "x-client-id": settings.cashfree_app_id or "",
            "x-client-secret": settings.cashfree_secret_key or "",
            "x-api-version": settings.cashfree_api_version,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def create_order(self, payload: Dict[str, Any]) -> Any:
        return self._request("POST", f"{self.base_url}/pg/orders", json=payload)

    def fetch_order(self, order_id: str) -> Any:
        url = f"{self.base_url}/pg/orders/{quote(order_id, safe='')}"
        return self._request("GET", url)

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            if method == "POST":
                response = requests.post(url, headers=self.headers, timeout=self.timeout, **kwargs)
            else:
                response = requests.get(url, headers=self.headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Cashfree {method} {url} failed: {e}")
            raise GatewayError(str(e)) from e

        if response.status_code >= 400:
            body = _error_body(response)
            logger.error(f"Cashfree {method} {url} returned {response.status_code}: {body}")
            raise GatewayError(
                f"Cashfree returned HTTP {response.status_code}", body=body
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Cashfree {method} {url} returned non-JSON body")
            raise GatewayError("Invalid JSON from Cashfree", body=response.text or None) from e


def _error_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None
