"""Production settings for the Storefront project."""

import os

from .base import *  # noqa: F401,F403

ALLOWED_HOSTS = [host for host in os.environ.get("ALLOWED_HOSTS", "").split(",") if host]

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# Structured logs for the log shipper
LOGGING["handlers"]["console"]["formatter"] = "json"  # noqa: F405
