"""Customer account views.

JSON routes forward to the customer record service and answer with the
refreshed customer:

- GET/POST /store/customers/me/
- PUT/DELETE /store/customers/me/addresses/<id>/

The address book page renders the same addresses through a DataTable.
The signed-in customer is identified by request.session["customer_id"].
"""

import json
import logging
from functools import wraps

from django.contrib import messages
from django.http import Http404, JsonResponse
from django.utils.decorators import method_decorator
from django.utils.html import format_html
from django.views import View
from django.views.generic import TemplateView

from storefront_ui.mixins import DataTableMixin
from storefront_ui.tables import BulkAction, Column, EmptyAction, RowAction

from . import customers
from .customers import CustomerServiceError, CustomerServiceUnavailable

logger = logging.getLogger(__name__)


def health_check(request):
    """Health check endpoint for container orchestration."""
    if customers.check_health():
        return JsonResponse({"status": "healthy", "customer_service": "connected"})
    return JsonResponse(
        {"status": "unhealthy", "customer_service": "unreachable"},
        status=503,
    )


def require_customer(view_func):
    """Decorator to require a signed-in customer in the session."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        customer_id = request.session.get("customer_id")
        if not customer_id:
            return JsonResponse({"message": "Customer not authenticated"}, status=401)
        request.customer_id = customer_id
        return view_func(request, *args, **kwargs)
    return wrapper


def _error_response(error, fallback):
    if isinstance(error, CustomerServiceUnavailable):
        message = "Customer service unavailable"
        return JsonResponse({"message": message, "error": str(error) or message}, status=503)
    message = error.message or fallback
    return JsonResponse({"message": message, "error": message}, status=error.status_code)


def _json_body(request):
    """Parsed JSON object from the request body, or None if it is not one."""
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


@method_decorator(require_customer, name="dispatch")
class CustomerMeView(View):
    """The signed-in customer.

    GET /store/customers/me/
    POST /store/customers/me/
    {
        "first_name": "Ada",
        "phone": "+1 555 0100"
    }

    Both return {"customer": {...}} with addresses.
    """

    def get(self, request):
        try:
            customer = customers.retrieve_customer(request.customer_id)
        except (CustomerServiceError, CustomerServiceUnavailable) as e:
            logger.error("Error retrieving customer %s: %s", request.customer_id, e)
            return _error_response(e, "Error retrieving customer")
        return JsonResponse({"customer": customer})

    def post(self, request):
        data = _json_body(request)
        if data is None:
            return JsonResponse({"message": "Invalid JSON", "error": "Invalid JSON"}, status=400)

        try:
            customers.update_customer(request.customer_id, data)
            customer = customers.retrieve_customer(request.customer_id)
        except (CustomerServiceError, CustomerServiceUnavailable) as e:
            logger.error("Error updating customer %s: %s", request.customer_id, e)
            return _error_response(e, "Error updating customer")
        return JsonResponse({"customer": customer})


@method_decorator(require_customer, name="dispatch")
class CustomerAddressView(View):
    """One of the signed-in customer's addresses.

    PUT /store/customers/me/addresses/<id>/
    {
        "address_1": "1 Harbour St",
        "city": "Cozumel"
    }

    DELETE /store/customers/me/addresses/<id>/

    Both return the refreshed {"customer": {...}}.
    """

    def put(self, request, address_id):
        data = _json_body(request)
        if data is None:
            return JsonResponse({"message": "Invalid JSON", "error": "Invalid JSON"}, status=400)

        try:
            customers.update_customer_addresses(address_id, data)
            customer = customers.retrieve_customer(request.customer_id)
        except (CustomerServiceError, CustomerServiceUnavailable) as e:
            logger.error("Error updating customer address %s: %s", address_id, e)
            return _error_response(e, "Error updating customer address")
        return JsonResponse({"customer": customer})

    def delete(self, request, address_id):
        try:
            customers.delete_customer_addresses(address_id)
            customer = customers.retrieve_customer(request.customer_id)
        except (CustomerServiceError, CustomerServiceUnavailable) as e:
            logger.error("Error deleting customer address %s: %s", address_id, e)
            return _error_response(e, "Error deleting customer address")
        return JsonResponse({"customer": customer})


def _full_name(address, index):
    return " ".join(part for part in (address.get("first_name"), address.get("last_name")) if part)


def _default_badges(address, index):
    labels = []
    if address.get("is_default_shipping"):
        labels.append("Shipping")
    if address.get("is_default_billing"):
        labels.append("Billing")
    return ", ".join(labels)


@method_decorator(require_customer, name="dispatch")
class AddressBookView(DataTableMixin, TemplateView):
    """Address book page for the signed-in customer."""

    template_name = "commerce/address_list.html"
    table_label = "Saved addresses"
    table_columns = (
        Column("name", "Name", cell=_full_name, sortable=True),
        Column("address", "Address", accessor="address_1", sortable=True),
        Column("city", "City", accessor="city", sortable=True),
        Column("postal_code", "Postal code", accessor="postal_code"),
        Column("country", "Country", accessor="country_code", align="center", width=96),
        Column("defaults", "Default for", cell=_default_badges),
    )
    table_selectable = True
    table_expandable = True
    table_searchable = True
    table_default_sort = "name"
    search_fields = ("first_name", "last_name", "company", "address_1", "city", "postal_code")

    service_unavailable = False
    address_ids = frozenset()

    def get_table_records(self):
        try:
            customer = customers.retrieve_customer(self.request.customer_id)
        except CustomerServiceUnavailable:
            self.service_unavailable = True
            return []
        except CustomerServiceError as e:
            if e.status_code == 404:
                raise Http404("Customer not found") from e
            raise
        addresses = customer.get("addresses") or []
        self.address_ids = frozenset(self.get_row_id(address) for address in addresses)
        return addresses

    def get_selectable_ids(self):
        # Only the signed-in customer's own addresses
        return self.address_ids

    def get_table_kwargs(self):
        if self.service_unavailable:
            return {
                "empty_message": "Your addresses could not be loaded. Please try again shortly.",
                "empty_icon": "map-pin",
            }
        return {
            "empty_message": "You have no saved addresses",
            "empty_icon": "map-pin",
            "empty_action": EmptyAction("Continue shopping", href="/"),
        }

    def get_bulk_actions(self):
        return (
            BulkAction("delete", "Delete", self.delete_addresses, icon="trash-2", variant="destructive"),
        )

    def has_row_actions(self):
        return True

    def get_row_actions(self, address):
        return (
            RowAction(
                "default-shipping",
                "Use for shipping",
                self.make_default_shipping,
                icon="check",
                disabled=bool(address.get("is_default_shipping")),
            ),
            RowAction("delete", "Delete", self.delete_address, icon="trash-2", destructive=True),
        )

    def render_expanded_row(self, address):
        return format_html(
            '<address class="not-italic text-sm text-neutral-600">'
            "{}<br>{}{}<br>{} {}<br>{}</address>",
            address.get("company") or _full_name(address, 0),
            address.get("address_1") or "",
            format_html("<br>{}", address["address_2"]) if address.get("address_2") else "",
            address.get("postal_code") or "",
            address.get("city") or "",
            address.get("phone") or "",
        )

    def _call_service(self, func, *args, success):
        try:
            func(*args)
        except (CustomerServiceError, CustomerServiceUnavailable) as e:
            logger.error("Address book action failed: %s", e)
            messages.error(self.request, "We could not update your addresses. Please try again.", fail_silently=True)
            return False
        messages.success(self.request, success, fail_silently=True)
        return True

    def delete_address(self, address_id):
        return self._call_service(customers.delete_customer_addresses, address_id, success="Address deleted.")

    def delete_addresses(self, address_ids):
        for address_id in address_ids:
            if not self._call_service(
                customers.delete_customer_addresses, address_id, success="Address deleted."
            ):
                return False
        return True

    def make_default_shipping(self, address_id):
        return self._call_service(
            customers.update_customer_addresses,
            address_id,
            {"is_default_shipping": True},
            success="Default shipping address updated.",
        )
