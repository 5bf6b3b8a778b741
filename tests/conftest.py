"""Pytest configuration for storefront tests."""

import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY="test-secret-key",
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": ":memory:",
                }
            },
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.sessions",
                "django.contrib.messages",
                "storefront_ui",
                "storefront.commerce",
            ],
            MIDDLEWARE=[
                "django.contrib.sessions.middleware.SessionMiddleware",
                "django.middleware.common.CommonMiddleware",
                "django.contrib.messages.middleware.MessageMiddleware",
            ],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "DIRS": [],
                    "APP_DIRS": True,
                    "OPTIONS": {
                        "context_processors": [
                            "django.template.context_processors.debug",
                            "django.template.context_processors.request",
                            "django.contrib.messages.context_processors.messages",
                            "storefront_ui.context_processors.storefront_ui",
                        ],
                    },
                },
            ],
            SESSION_ENGINE="django.contrib.sessions.backends.signed_cookies",
            CUSTOMER_SERVICE_URL="http://customers.test",
            CUSTOMER_SERVICE_TIMEOUT=2.0,
            CUSTOMER_SERVICE_TOKEN="test-token",
            DEFAULT_AUTO_FIELD="django.db.models.BigAutoField",
            USE_TZ=True,
            ROOT_URLCONF="storefront.urls",
        )
    django.setup()


@pytest.fixture
def customer_request(rf):
    """Build requests carrying a signed-in customer session."""
    def build(method, path, data=None, customer_id="cus_01", **extra):
        factory = getattr(rf, method.lower())
        if data is not None and method.upper() in ("POST", "PUT", "PATCH"):
            extra.setdefault("content_type", "application/json")
        request = factory(path, data, **extra) if data is not None else factory(path, **extra)
        request.session = {"customer_id": customer_id} if customer_id else {}
        return request
    return build


@pytest.fixture
def addresses():
    return [
        {
            "id": "addr_1",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "company": "",
            "address_1": "12 St James Sq",
            "address_2": "",
            "city": "London",
            "postal_code": "SW1Y 4JH",
            "country_code": "gb",
            "phone": "+44 20 7946 0000",
            "is_default_shipping": True,
            "is_default_billing": False,
        },
        {
            "id": "addr_2",
            "first_name": "Grace",
            "last_name": "Hopper",
            "company": "Navy Yard",
            "address_1": "1 Harbour St",
            "address_2": "Suite 4",
            "city": "Arlington",
            "postal_code": "22201",
            "country_code": "us",
            "phone": "",
            "is_default_shipping": False,
            "is_default_billing": True,
        },
        {
            "id": "addr_3",
            "first_name": "Alan",
            "last_name": "Turing",
            "company": "",
            "address_1": "Bletchley Park",
            "address_2": "",
            "city": "Milton Keynes",
            "postal_code": "MK3 6EB",
            "country_code": "gb",
            "phone": "",
            "is_default_shipping": False,
            "is_default_billing": False,
        },
    ]
