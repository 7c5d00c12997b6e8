"""System checks for the gift wrap app's host dependencies."""

from django.apps import apps
from django.conf import settings
from django.core import checks

SESSION_MIDDLEWARE = "django.contrib.sessions.middleware.SessionMiddleware"


def missing_dependencies() -> list[tuple[str, str]]:
    """Return (check id, message) for each unavailable dependency."""
    missing = []
    if not apps.is_installed("rest_framework"):
        missing.append((
            "giftwrap.W001",
            "EVA Gift Wrap requires Django REST framework. Add 'rest_framework' to INSTALLED_APPS.",
        ))
    if not apps.is_installed("django.contrib.sessions") or SESSION_MIDDLEWARE not in getattr(
        settings, "MIDDLEWARE", []
    ):
        missing.append((
            "giftwrap.W002",
            "EVA Gift Wrap requires sessions. Enable django.contrib.sessions and SessionMiddleware.",
        ))
    return missing


@checks.register()
def check_dependencies(app_configs, **kwargs):
    return [checks.Warning(message, id=check_id) for check_id, message in missing_dependencies()]
