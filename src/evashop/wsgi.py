"""WSGI config for the EVA shop project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "evashop.settings.base")

application = get_wsgi_application()
