"""Gift wrap fee calculation.

Attaches a single non-taxable fee line to the cart during a totals pass
when the shopper asked for gift wrap and the feature is enabled.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol

from django.utils.formats import number_format
from django.utils.html import strip_tags
from django.utils.text import slugify

from . import conf
from .options import DEFAULT_LABEL, GiftWrapSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeeLine:
    """A fee added to cart totals. Never persisted."""

    id: str
    label: str
    amount: Decimal
    taxable: bool = False

    @classmethod
    def for_settings(cls, settings: GiftWrapSettings) -> "FeeLine":
        label = strip_tags(settings.label).strip() or DEFAULT_LABEL
        return cls(
            id=slugify(label) or "gift-wrap",
            label=label,
            amount=settings.fee_amount,
            taxable=False,
        )

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "amount": str(self.amount),
            "taxable": self.taxable,
        }


class Cart(Protocol):
    """Host cart as seen by the gift wrap app."""

    def get_fees(self) -> Iterable[FeeLine]: ...

    def add_fee(self, fee: FeeLine) -> None: ...

    def calculate_totals(self) -> None: ...


@dataclass(frozen=True)
class ExecutionContext:
    """Where a totals pass runs.

    ``is_admin`` marks administrative (back office) requests;
    ``is_background`` marks asynchronous recalculations a shopper triggered.
    """

    is_admin: bool = False
    is_background: bool = False

    @classmethod
    def from_request(cls, request) -> "ExecutionContext":
        if request is None:
            return cls()
        prefix = conf.get_setting("ADMIN_PATH_PREFIX", "/admin/")
        path = getattr(request, "path", "") or ""
        headers = getattr(request, "headers", {}) or {}
        is_background = (
            headers.get("X-Requested-With") == "XMLHttpRequest"
            or "application/json" in headers.get("Accept", "")
            or "application/json" in headers.get("Content-Type", "")
        )
        return cls(
            is_admin=bool(prefix) and path.startswith(prefix),
            is_background=is_background,
        )

    @property
    def customer_facing(self) -> bool:
        return not self.is_admin or self.is_background


def format_fee(amount: Decimal, symbol: str | None = None) -> str:
    """Format a fee for display, localized, e.g. "€1,50"."""
    if symbol is None:
        symbol = conf.get_setting("CURRENCY_SYMBOL", "€")
    return f"{symbol}{number_format(amount, decimal_pos=2)}"


def checkbox_label(settings: GiftWrapSettings) -> str:
    """Checkbox label with the fee appended, e.g. "Confezione regalo (+€1,50)"."""
    return f"{settings.label} (+{format_fee(settings.fee_amount)})"


class FeeApplicator:
    """Adds the gift wrap fee to a cart."""

    def apply(
        self,
        cart: Cart,
        settings: GiftWrapSettings,
        preference: bool,
        context: ExecutionContext | None = None,
    ) -> FeeLine | None:
        """Attach the fee line if it applies.

        Idempotent within a totals pass: a fee with the same id already on
        the cart is not added again.

        Returns:
            The fee line on the cart, or None when no fee applies
        """
        context = context or ExecutionContext()
        if not context.customer_facing:
            logger.debug("Gift wrap fee skipped: administrative context")
            return None

        if not settings.enabled:
            return None

        logger.debug(f"Gift wrap fee decision: gift_wrap={int(bool(preference))}")
        if not preference:
            return None

        fee = FeeLine.for_settings(settings)
        for existing in cart.get_fees() or ():
            if getattr(existing, "id", None) == fee.id:
                return existing

        logger.info(f'Adding gift wrap fee: label="{fee.label}" amount={fee.amount}')
        cart.add_fee(fee)
        return fee
