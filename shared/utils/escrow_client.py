import logging
from typing import Any, Optional
from urllib.parse import quote

import requests
from requests.auth import HTTPBasicAuth

from shared.core.config import settings

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    401: "Escrow API authentication failed. Please check your ESCROW_API_EMAIL and ESCROW_API_KEY credentials.",
    403: "Escrow API access forbidden. Please check your API key permissions.",
    404: "Escrow API resource not found.",
}


class EscrowApiError(Exception):
    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


def escrow_path(*parts) -> str:
    """Join path segments, URL-encoding caller supplied identifiers."""
    return "/" + "/".join(quote(str(p), safe="") for p in parts)


class EscrowClient:
    """Thin JSON client for the escrow gateway REST API."""

    def __init__(
        self,
        base_url: str,
        email: Optional[str],
        api_key: Optional[str],
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.email = email
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _ensure_credentials(self):
        if not self.email or not self.api_key:
            raise EscrowApiError(
                500,
                "Escrow API credentials are not configured. Please set ESCROW_API_EMAIL and ESCROW_API_KEY environment variables."
            )

    @staticmethod
    def _error_from_response(response: requests.Response) -> EscrowApiError:
        try:
            body = response.json()
        except ValueError:
            body = response.text or None

        gateway_message = None
        if isinstance(body, dict):
            gateway_message = body.get("message") or body.get("error")

        status_code = response.status_code
        if status_code in STATUS_MESSAGES:
            message = STATUS_MESSAGES[status_code]
        elif status_code == 422:
            message = gateway_message or "Escrow API validation error. Please check your request data."
        else:
            message = gateway_message or "Escrow API request failed"

        return EscrowApiError(status_code, message, body)

    def request(
        self,
        method: str,
        url: str,
        data: Optional[dict] = None,
        params: Optional[dict] = None,
        as_customer: Optional[str] = None,
        idempotency_key: Optional[str] = None,
        headers: Optional[dict] = None
    ) -> Any:
        self._ensure_credentials()

        request_headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        request_headers.update(headers or {})
        if as_customer:
            request_headers["As-Customer"] = as_customer
        if idempotency_key:
            request_headers["Idempotency-Key"] = idempotency_key

        full_url = f"{self.base_url}{url}"
        try:
            response = self.session.request(
                method.upper(),
                full_url,
                json=data,
                params=params,
                headers=request_headers,
                auth=HTTPBasicAuth(self.email, self.api_key),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Escrow API transport error on %s %s: %s",
                         method.upper(), full_url, e)
            raise EscrowApiError(500, str(e) or "Escrow API request failed")

        if not response.ok:
            error = self._error_from_response(response)
            # never log credentials, only whether they are present
            logger.error(
                "Escrow API error status=%s method=%s url=%s message=%s has_credentials=%s",
                error.status_code, method.upper(), full_url, error.message,
                bool(self.email and self.api_key)
            )
            raise error

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text


def get_escrow_client() -> EscrowClient:
    return EscrowClient(
        base_url=settings.ESCROW_API_BASE_URL,
        email=settings.ESCROW_API_EMAIL,
        api_key=settings.ESCROW_API_KEY,
        timeout=settings.ESCROW_API_TIMEOUT,
    )


def call_escrow(
    method: str,
    url: str,
    data: Optional[dict] = None,
    params: Optional[dict] = None,
    as_customer: Optional[str] = None,
    idempotency_key: Optional[str] = None
) -> Any:
    return get_escrow_client().request(
        method, url, data=data, params=params,
        as_customer=as_customer, idempotency_key=idempotency_key
    )
