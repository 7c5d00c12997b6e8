"""Session access for the gift wrap preference.

The preference is one boolean per shopping session. Sessions are resolved
from the request explicitly and handed to every operation; nothing here
reaches for a "current" session.
"""

import logging
from importlib import import_module

from django.conf import settings

from . import conf

logger = logging.getLogger(__name__)


class SessionAccessor:
    """Resolve (and lazily initialize) the session for a request."""

    def load(self, request):
        """Get the request's session, creating it when needed.

        Attaches a fresh session when the request has none (no session
        middleware ran, e.g. a bare API call) and saves sessions that do not
        have a key yet so later writes have somewhere to land.

        Returns:
            The session, or None when it cannot be initialized
        """
        if request is None:
            return None

        try:
            session = getattr(request, "session", None)
            if session is None:
                engine = import_module(settings.SESSION_ENGINE)
                session = engine.SessionStore()
                request.session = session
                logger.debug("Session initialized for request without session middleware")

            if session.session_key is None:
                session.save()

            return session
        except Exception as e:
            logger.warning(f"Session unavailable, gift wrap preference falls back to default: {e}")
            return None


class PreferenceStore:
    """Read and write the gift wrap preference on a session."""

    def __init__(self, key: str | None = None):
        self.key = key or conf.get_session_key()

    def read(self, session) -> bool:
        """Return the stored preference, False when absent or unavailable."""
        if session is None:
            return False
        try:
            return bool(session.get(self.key, False))
        except Exception as e:
            logger.warning(f"Session read failed, assuming no gift wrap: {e}")
            return False

    def write(self, session, value: bool) -> None:
        """Store the preference; best effort, a missing session is a no-op."""
        if session is None:
            logger.debug("No session available, gift wrap preference not stored")
            return
        try:
            session[self.key] = bool(value)
        except Exception as e:
            logger.warning(f"Session write failed, gift wrap preference dropped: {e}")
