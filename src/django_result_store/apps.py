"""Django app configuration for django-result-store."""

from django.apps import AppConfig


class ResultStoreConfig(AppConfig):
    """Configuration for the django-result-store Django app."""

    name = "django_result_store"
    verbose_name = "Result Store"

    def ready(self) -> None:
        """Validate settings when Django starts."""
        from django_result_store.conf.settings import validate_settings

        validate_settings()
