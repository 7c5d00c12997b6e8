"""Host lifecycle events the gift wrap app listens to.

The host sends these; ``hooks.connect()`` wires them to the handlers.

    store_api_loaded(sender, registry, request=None)
    cart_customer_updated(sender, request, payload, cart=None)
    checkout_order_created(sender, request, order, payload)
    cart_calculate_fees(sender, cart, request=None, session=None)
"""

from django.dispatch import Signal

store_api_loaded = Signal()
cart_customer_updated = Signal()
checkout_order_created = Signal()
cart_calculate_fees = Signal()
