"""Event name -> handler table and the adapter onto Django signals.

Handlers take the service plus the event's keyword arguments and never
raise: gift wrap is an optional extra and must not block a checkout.
"""

import logging
from functools import wraps

from . import signals
from .payload import GiftWrapSignals
from .schema import register_store_api_extension

logger = logging.getLogger(__name__)


def never_raises(handler):
    """Log and swallow any exception escaping a handler."""
    @wraps(handler)
    def wrapper(service, **kwargs):
        try:
            return handler(service, **kwargs)
        except Exception as e:
            logger.exception(f"Gift wrap handler {handler.__name__} failed: {e}")
            return None
    return wrapper


@never_raises
def handle_store_api_loaded(service, registry=None, request=None, **kwargs):
    return register_store_api_extension(registry, service, request=request)


@never_raises
def handle_cart_customer_updated(service, request=None, payload=None, cart=None, **kwargs):
    session = service.sessions.load(request)
    if cart is None:
        cart = service.load_cart(request, session)
    return service.engine.update_from_cart(
        session,
        GiftWrapSignals.from_payload(payload),
        cart=cart,
    )


@never_raises
def handle_checkout_order_created(service, request=None, order=None, payload=None, **kwargs):
    if order is None:
        logger.warning("Checkout order event without an order, gift wrap not persisted")
        return None
    session = service.sessions.load(request)
    return service.engine.finalize_order(
        session,
        order,
        GiftWrapSignals.from_payload(payload),
    )


@never_raises
def handle_cart_calculate_fees(service, cart=None, request=None, session=None, **kwargs):
    if cart is None:
        return None
    return service.apply_fees(cart, request=request, session=session)


HANDLERS = {
    "store_api_loaded": handle_store_api_loaded,
    "cart_customer_updated": handle_cart_customer_updated,
    "checkout_order_created": handle_checkout_order_created,
    "cart_calculate_fees": handle_cart_calculate_fees,
}

SIGNALS = {
    "store_api_loaded": signals.store_api_loaded,
    "cart_customer_updated": signals.cart_customer_updated,
    "checkout_order_created": signals.checkout_order_created,
    "cart_calculate_fees": signals.cart_calculate_fees,
}

def dispatch(service, event: str, **kwargs):
    """Invoke the handler registered for an event."""
    handler = HANDLERS.get(event)
    if handler is None:
        raise KeyError(f"Unknown gift wrap event: {event}")
    return handler(service, **kwargs)


def connect(service) -> None:
    """Connect every host signal to its handler for this service.

    Replaces receivers from an earlier ``connect()``.
    """
    disconnect()
    for event, signal in SIGNALS.items():
        def receiver(sender, event=event, **kwargs):
            kwargs.pop("signal", None)
            return dispatch(service, event, **kwargs)

        signal.connect(receiver, weak=False, dispatch_uid=f"giftwrap.{event}")
    logger.debug("Gift wrap hooks connected")


def disconnect() -> None:
    for event, signal in SIGNALS.items():
        signal.disconnect(dispatch_uid=f"giftwrap.{event}")
