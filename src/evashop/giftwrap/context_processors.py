"""Context processors for the gift wrap app."""

from .apps import get_service


def gift_wrap_context(request):
    """Add gift wrap display settings to template context."""
    service = get_service()
    if service is None:
        return {"gift_wrap": None}
    return {"gift_wrap": service.frontend_settings()}
