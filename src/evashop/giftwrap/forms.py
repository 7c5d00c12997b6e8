"""Settings form for the gift wrap option."""

from decimal import Decimal

from django import forms

from .options import DEFAULT_FEE, DEFAULT_LABEL, DEFAULT_SECTION_TITLE, GiftWrapSettings


class GiftWrapSettingsForm(forms.Form):
    """Edit the gift wrap options."""

    enabled = forms.BooleanField(
        label="Enable Gift Wrap",
        help_text="Show the gift wrap option at checkout",
        required=False,
    )
    section_title = forms.CharField(
        label="Section Title",
        help_text="The heading shown above the gift wrap checkbox.",
        max_length=200,
        initial=DEFAULT_SECTION_TITLE,
    )
    label = forms.CharField(
        label="Checkbox Label",
        help_text="The label shown for the gift wrap checkbox. The fee will be appended automatically.",
        max_length=200,
        initial=DEFAULT_LABEL,
    )
    fee_amount = forms.DecimalField(
        label="Fee",
        help_text="The fee amount for gift wrapping.",
        min_value=Decimal("0"),
        max_digits=10,
        decimal_places=2,
        initial=DEFAULT_FEE,
    )
    custom_style = forms.CharField(
        label="Custom CSS",
        help_text="Add custom CSS to style the gift wrap checkbox. Use .eva-gift-wrap-option as the container class.",
        required=False,
        widget=forms.Textarea(attrs={"rows": 8, "style": "width: 100%; font-family: monospace;"}),
    )

    @classmethod
    def initial_from(cls, settings: GiftWrapSettings) -> dict:
        return {
            "enabled": settings.enabled,
            "section_title": settings.section_title,
            "label": settings.label,
            "fee_amount": settings.fee_amount,
            "custom_style": settings.custom_style,
        }
