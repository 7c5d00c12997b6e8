"""Order snapshot of the gift wrap preference.

The snapshot is written once, when checkout creates the order, and is the
only durable record of the choice. Later session changes never touch it.
"""

import logging
from typing import Protocol

from django.db import IntegrityError, transaction

from . import conf

logger = logging.getLogger(__name__)

YES = "yes"
NO = "no"


def order_ref(order) -> tuple[str, str]:
    """Identify a host order by model label and primary key."""
    meta = getattr(order, "_meta", None)
    order_type = meta.label_lower if meta is not None else type(order).__name__.lower()
    order_id = getattr(order, "pk", None)
    if order_id is None:
        order_id = getattr(order, "id", None)
    return order_type, str(order_id)


class OrderMetaStore(Protocol):
    """Durable per-order metadata."""

    def get(self, order, key: str) -> str | None: ...

    def add(self, order, key: str, value: str) -> bool: ...


class ModelOrderMetaStore:
    """Order metadata rows in the ``OrderMeta`` table."""

    def get(self, order, key):
        from .models import OrderMeta

        order_type, order_id = order_ref(order)
        return (
            OrderMeta.objects.filter(order_type=order_type, order_id=order_id, key=key)
            .values_list("value", flat=True)
            .first()
        )

    def add(self, order, key, value):
        """Create the row; returns False if one already exists."""
        from .models import OrderMeta

        order_type, order_id = order_ref(order)
        try:
            with transaction.atomic():
                _, created = OrderMeta.objects.get_or_create(
                    order_type=order_type,
                    order_id=order_id,
                    key=key,
                    defaults={"value": value},
                )
        except IntegrityError:
            return False
        return created


class MemoryOrderMetaStore:
    """In-process order metadata, for tests and scripts."""

    def __init__(self):
        self.rows = {}

    def get(self, order, key):
        return self.rows.get((*order_ref(order), key))

    def add(self, order, key, value):
        ref = (*order_ref(order), key)
        if ref in self.rows:
            return False
        self.rows[ref] = value
        return True


class OrderPersister:
    """Snapshots the reconciled preference into order metadata."""

    def __init__(self, store: OrderMetaStore, key: str | None = None):
        self.store = store
        self.key = key or conf.get_order_meta_key()

    def persist(self, order, value: bool) -> bool:
        """Write "yes"/"no" onto the order, once.

        Orders exposing ``update_meta_data(key, value)`` keep their own
        metadata and are written through it; others go to the store.

        Returns:
            True if the snapshot was written, False if one already existed
        """
        snapshot = YES if value else NO

        if hasattr(order, "update_meta_data"):
            existing = order.get_meta(self.key) if hasattr(order, "get_meta") else None
            if existing:
                logger.info(f"Order {order_ref(order)[1]} already has {self.key}={existing}, kept")
                return False
            order.update_meta_data(self.key, snapshot)
            return True

        written = self.store.add(order, self.key, snapshot)
        if not written:
            logger.info(f"Order {order_ref(order)[1]} already has {self.key}, kept")
        return written

    def read(self, order) -> str | None:
        if hasattr(order, "get_meta"):
            return order.get_meta(self.key) or None
        return self.store.get(order, self.key)
