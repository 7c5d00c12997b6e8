"""Gift wrap preference reconciliation.

One boolean, four write paths:

- Toggle endpoint: an explicit value, written as-is.
- Cart customer update: additional field if present, else extension data if
  present, else nothing is written.
- Order creation from checkout: additional field, else extension data, else
  the value already in the session. The result is written back to the
  session and snapshotted onto the order.

Cart-side writes are followed by a totals recalculation so the fee shows up
in the same response. No operation here raises to its caller.
"""

import logging

from .orders import OrderPersister, order_ref
from .payload import GiftWrapSignals
from .session import PreferenceStore

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """Decides and stores the authoritative gift wrap preference."""

    def __init__(self, preferences: PreferenceStore, persister: OrderPersister):
        self.preferences = preferences
        self.persister = persister

    def current(self, session) -> bool:
        """Get the reconciled preference for a session."""
        return self.preferences.read(session)

    def toggle(self, session, enabled, cart=None) -> bool:
        """Apply an explicit toggle.

        Args:
            session: Shopper session (None degrades to a no-op write)
            enabled: Requested value, coerced by truthiness
            cart: Cart to recalculate afterwards (optional)

        Returns:
            The value written
        """
        value = bool(enabled)
        logger.info(
            f"Toggle request: enabled={int(value)} "
            f"session_id={getattr(session, 'session_key', None) or 'no-session'}"
        )
        self.preferences.write(session, value)
        self._recalculate(cart, "toggle")
        return value

    def update_from_cart(self, session, signals: GiftWrapSignals, cart=None) -> bool | None:
        """Apply a cart customer update.

        Returns:
            The value written, or None when the payload carried no signal
            and the session was left untouched
        """
        resolution = signals.resolve()
        if resolution is None:
            return None

        self.preferences.write(session, resolution.value)
        logger.info(
            f"Cart update: gift_wrap={int(resolution.value)} source={resolution.source}"
        )
        self._recalculate(cart, "cart update")
        return resolution.value

    def finalize_order(self, session, order, signals: GiftWrapSignals) -> bool:
        """Settle the preference for an order created from checkout.

        Writes the chosen value back to the session and snapshots it onto the
        order as "yes"/"no".

        Returns:
            The chosen value
        """
        resolution = signals.resolve(fallback=self.current(session))
        value = resolution.value

        logger.info(
            f"Checkout update: order_id={order_ref(order)[1]} "
            f"gift_wrap={int(value)} source={resolution.source}"
        )

        try:
            self.persister.persist(order, value)
        except Exception as e:
            logger.exception(f"Failed to snapshot gift wrap onto order: {e}")

        self.preferences.write(session, value)
        return value

    def _recalculate(self, cart, reason: str) -> None:
        if cart is None:
            logger.debug(f"{reason}: no cart available, totals not recalculated")
            return
        try:
            cart.calculate_totals()
            logger.debug(f"{reason}: cart totals recalculated")
        except Exception as e:
            logger.exception(f"{reason}: cart totals recalculation failed: {e}")
