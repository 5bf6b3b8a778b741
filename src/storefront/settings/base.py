"""Base settings for the Storefront project."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
SRC_DIR = BASE_DIR / "src"

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get("SECRET_KEY")

# Debug mode - override in dev.py
DEBUG = False

ALLOWED_HOSTS = []

# Application definition
DJANGO_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

# Reusable UI library
LIBRARY_APPS = [
    "storefront_ui",
]

# Local apps
LOCAL_APPS = [
    "storefront.commerce",
]

INSTALLED_APPS = DJANGO_APPS + LIBRARY_APPS + LOCAL_APPS

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "storefront.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
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
]

WSGI_APPLICATION = "storefront.wsgi.application"

# No DATABASES: there are no local models, customers and addresses are
# read from the customer service

# Customer identity lives in the session, set by the storefront login flow
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Storefront configuration
STORE_NAME = os.environ.get("STORE_NAME", "Storefront")

# Customer record service
CUSTOMER_SERVICE_URL = os.environ.get("CUSTOMER_SERVICE_URL", "http://localhost:9000")
CUSTOMER_SERVICE_TIMEOUT = float(os.environ.get("CUSTOMER_SERVICE_TIMEOUT", "5.0"))
CUSTOMER_SERVICE_TOKEN = os.environ.get("CUSTOMER_SERVICE_TOKEN", "")

# Storefront UI configuration
STOREFRONT_UI = {
    "SITE_NAME": STORE_NAME,
    "TABLE_EMPTY_MESSAGE": "Nothing here yet",
}

# Logging configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
        "json": {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        "storefront": {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
        "storefront_ui": {
            "handlers": ["console"],
            "level": os.environ.get("STOREFRONT_UI_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
