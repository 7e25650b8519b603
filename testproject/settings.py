"""Django settings for the django-result-store test project."""

from __future__ import annotations

SECRET_KEY = "test-secret-key-not-for-production"

DEBUG = True

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django_result_store",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True

DJANGO_RESULT_STORE = {
    "ID_STRATEGY": "timestamp",
    "METRICS_ENABLED": True,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "django_result_store": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}
