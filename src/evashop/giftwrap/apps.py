"""Gift wrap app configuration."""

import logging

from django.apps import AppConfig, apps

logger = logging.getLogger(__name__)


class GiftWrapConfig(AppConfig):
    """App configuration for the gift wrap checkout option."""

    name = "evashop.giftwrap"
    label = "giftwrap"
    verbose_name = "Gift Wrap"
    default_auto_field = "django.db.models.BigAutoField"

    service = None

    def ready(self):
        from . import checks, hooks
        from .service import build_service

        missing = checks.missing_dependencies()
        if missing:
            logger.warning(f"Gift wrap disabled: {missing[0][1]}")
            self.service = None
            return

        self.service = build_service()
        hooks.connect(self.service)


def get_service():
    """Get the wired service, or None when the app is disabled."""
    return apps.get_app_config("giftwrap").service
