"""Development settings for the EVA shop project."""

import os

from .base import *  # noqa: F401,F403

DEBUG = True

SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-not-for-production")

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]
