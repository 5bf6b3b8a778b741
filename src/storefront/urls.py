"""URL configuration for the Storefront project."""

from django.urls import include, path

from storefront.commerce.views import health_check

urlpatterns = [
    # Health check
    path("health/", health_check, name="health_check"),

    # Storefront API and customer pages
    path("store/", include("storefront.commerce.urls", namespace="commerce")),
]
