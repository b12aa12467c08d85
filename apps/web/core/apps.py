"""Django app configuration for core module."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.core"
    label = "core"
    verbose_name = "Core"
