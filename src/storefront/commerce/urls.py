"""Commerce URL patterns: customer account API and pages."""

from django.urls import path

from . import views

app_name = "commerce"

urlpatterns = [
    # Customer account (JSON)
    path("customers/me/", views.CustomerMeView.as_view(), name="customer-me"),
    path(
        "customers/me/addresses/<str:address_id>/",
        views.CustomerAddressView.as_view(),
        name="customer-address",
    ),

    # Address book (HTML)
    path("customers/me/addresses/", views.AddressBookView.as_view(), name="address-book"),
]
