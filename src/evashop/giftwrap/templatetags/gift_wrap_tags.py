"""Template tags for the gift wrap checkout section."""

from django import template
from django.utils.html import strip_tags
from django.utils.safestring import mark_safe

from ..apps import get_service

register = template.Library()

BASE_STYLE = """
.eva-gift-wrap-section {
    margin-bottom: 12px;
}
.eva-gift-wrap-accordion-header {
    display: flex;
    justify-content: space-between;
    align-items: center;
    width: 100%;
    padding: 0;
    margin-bottom: 12px;
    background: none;
    border: none;
    cursor: pointer;
    font-size: inherit;
    font-family: inherit;
    text-align: left;
    color: inherit;
}
.eva-gift-wrap-accordion-header:hover {
    opacity: 0.8;
}
.eva-gift-wrap-accordion-title {
    font-weight: 600;
    font-size: 0.875em;
    text-transform: uppercase;
    letter-spacing: 0.05em;
}
.eva-gift-wrap-chevron {
    flex-shrink: 0;
    color: currentColor;
}
.eva-gift-wrap-option .components-checkbox-control__input-container svg {
    display: none !important;
}
"""


def render_styles(custom_style: str = "") -> str:
    """Base plus custom styles, markup stripped, wrapped in a style tag."""
    css = strip_tags(BASE_STYLE) + strip_tags(custom_style or "")
    # Style content is raw text: entities are not decoded, so no escaping,
    # but nothing may close the element early.
    css = css.replace("</", "<\\/")
    return mark_safe(f'<style id="eva-gift-wrap-css">{css}</style>')


@register.simple_tag
def gift_wrap_styles():
    """Emit the gift wrap stylesheet for the page head.

    Usage:
        {% load gift_wrap_tags %}
        {% gift_wrap_styles %}
    """
    service = get_service()
    custom_style = service.settings.get().custom_style if service is not None else ""
    return render_styles(custom_style)
