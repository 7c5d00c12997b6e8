"""Gift wrap composition root.

``build_service()`` constructs every component once from configuration;
the app config holds the result. Tests build their own with in-memory
collaborators.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from django.utils.module_loading import import_string

from . import conf
from .fees import ExecutionContext, FeeApplicator, FeeLine, checkbox_label, format_fee
from .options import SettingsStore
from .orders import OrderPersister
from .reconcile import ReconciliationEngine
from .session import PreferenceStore, SessionAccessor

logger = logging.getLogger(__name__)


@dataclass
class GiftWrapService:
    """All gift wrap components, wired together."""

    settings: SettingsStore
    sessions: SessionAccessor
    engine: ReconciliationEngine
    fees: FeeApplicator = field(default_factory=FeeApplicator)
    cart_loader: Callable | None = None

    def load_cart(self, request, session):
        """Get the shopper's cart from the host, or None."""
        if self.cart_loader is None:
            return None
        try:
            return self.cart_loader(request, session)
        except Exception as e:
            logger.warning(f"Cart unavailable: {e}")
            return None

    def apply_fees(
        self,
        cart,
        request=None,
        session=None,
        context: ExecutionContext | None = None,
    ) -> FeeLine | None:
        """Run the fee applicator for one totals pass.

        The session is taken from the request when not given.
        """
        if context is None:
            context = ExecutionContext.from_request(request)
        if session is None and request is not None:
            session = self.sessions.load(request)
        return self.fees.apply(
            cart,
            self.settings.get(),
            self.engine.current(session),
            context,
        )

    def frontend_settings(self) -> dict:
        """Values the checkout script needs to render the option."""
        current = self.settings.get()
        return {
            "sectionTitle": current.section_title,
            "label": current.label,
            "feeFormatted": format_fee(current.fee_amount),
            "checkboxLabel": checkbox_label(current),
            "featureEnabled": current.enabled,
        }


def build_service(
    options=None,
    order_meta_store=None,
    cart_loader=None,
) -> GiftWrapService:
    """Construct the service from the ``GIFT_WRAP`` setting.

    Any argument given replaces the configured collaborator.
    """
    config = conf.get_config()

    if options is None:
        options = import_string(config["OPTIONS_BACKEND"])()
    if order_meta_store is None:
        order_meta_store = import_string(config["ORDER_META_STORE"])()
    if cart_loader is None and config.get("CART_LOADER"):
        cart_loader = import_string(config["CART_LOADER"])

    preferences = PreferenceStore(config["SESSION_KEY"])
    persister = OrderPersister(order_meta_store, config["ORDER_META_KEY"])

    return GiftWrapService(
        settings=SettingsStore(options),
        sessions=SessionAccessor(),
        engine=ReconciliationEngine(preferences, persister),
        cart_loader=cart_loader,
    )
