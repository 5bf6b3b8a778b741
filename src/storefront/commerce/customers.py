"""HTTP client for the customer record service.

Customers and their addresses are owned by an external service. The
storefront never stores them; every read and write goes through the
functions here, which raise CustomerServiceError for rejected requests and
CustomerServiceUnavailable when the service cannot be reached.
"""

import logging
from typing import Any

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)

# Fields returned for the signed-in customer
CUSTOMER_FIELDS = [
    "id",
    "email",
    "first_name",
    "last_name",
    "phone",
    "created_at",
    "updated_at",
    "addresses.*",
]


class CustomerServiceError(Exception):
    """Error response from the customer service."""

    def __init__(self, status_code: int, message: str, details: dict | None = None):
        self.status_code = status_code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CustomerServiceUnavailable(Exception):
    """Customer service is unavailable."""

    pass


def _get_client() -> httpx.Client:
    """Get a configured httpx client."""
    headers = {"Accept": "application/json"}
    if settings.CUSTOMER_SERVICE_TOKEN:
        headers["Authorization"] = f"Bearer {settings.CUSTOMER_SERVICE_TOKEN}"
    return httpx.Client(
        base_url=settings.CUSTOMER_SERVICE_URL,
        timeout=settings.CUSTOMER_SERVICE_TIMEOUT,
        headers=headers,
    )


def _handle_response(response: httpx.Response) -> dict:
    """Handle response from the customer service."""
    if response.is_success:
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    try:
        error_data = response.json()
    except ValueError:
        error_data = {}
    if not isinstance(error_data, dict):
        error_data = {}

    error = CustomerServiceError(
        status_code=response.status_code,
        message=error_data.get("message") or response.reason_phrase or "Unknown error",
        details=error_data.get("details"),
    )
    logger.warning("Customer service returned %s: %s", error.status_code, error.message)
    raise error


def _request(method: str, url: str, **kwargs) -> dict:
    try:
        with _get_client() as client:
            response = client.request(method, url, **kwargs)
    except httpx.RequestError as e:
        logger.error("Customer service unavailable: %s", e)
        raise CustomerServiceUnavailable(str(e)) from e
    return _handle_response(response)


def check_health() -> bool:
    """True if GET /health answers 200 with {"status": "ok"}.

    Never raises: an unreachable service or a malformed body is unhealthy.
    """
    try:
        with _get_client() as client:
            response = client.get("/health")
    except httpx.RequestError as e:
        logger.warning("Customer service health check failed: %s", e)
        return False

    if response.status_code != 200:
        logger.warning("Customer service health check returned %s", response.status_code)
        return False
    try:
        data = response.json()
    except ValueError:
        logger.warning("Customer service health check returned a non-JSON body")
        return False
    return isinstance(data, dict) and data.get("status") == "ok"


def query_graph(entity: str, fields: list[str], filters: dict[str, Any] | None = None) -> list[dict]:
    """Query records of one entity from the customer service.

    Args:
        entity: Entity name, e.g. "customer"
        fields: Fields to return; "relation.*" expands a relation
        filters: Optional equality filters

    Returns:
        List of matching records

    Raises:
        CustomerServiceError: On a rejected query
        CustomerServiceUnavailable: If service is unavailable
    """
    payload = {
        "entity": entity,
        "fields": list(fields),
        "filters": filters or {},
    }
    data = _request("POST", "/query", json=payload)
    return data.get("data", [])


def retrieve_customer(customer_id: str) -> dict:
    """Fetch a customer with their addresses.

    Raises:
        CustomerServiceError: 404 if no such customer
        CustomerServiceUnavailable: If service is unavailable
    """
    customers = query_graph("customer", CUSTOMER_FIELDS, {"id": customer_id})
    if not customers:
        raise CustomerServiceError(404, "Customer not found")
    return customers[0]


def update_customer(customer_id: str, data: dict) -> dict:
    """Update customer fields. Returns the service's response body."""
    logger.info("Updating customer %s", customer_id)
    return _request("POST", f"/customers/{customer_id}", json=data)


def update_customer_addresses(address_id: str, data: dict) -> dict:
    """Update one stored address."""
    logger.info("Updating customer address %s", address_id)
    return _request("POST", f"/customers/addresses/{address_id}", json=data)


def delete_customer_addresses(address_id: str) -> dict:
    """Delete one stored address."""
    logger.info("Deleting customer address %s", address_id)
    return _request("DELETE", f"/customers/addresses/{address_id}")
