"""Store API exposure of the gift wrap preference.

Registers the ``gift_wrap`` extension data on the cart and checkout
endpoints and the gift wrap checkbox as an additional checkout field.
"""

import logging
from dataclasses import asdict, dataclass

from . import conf
from .fees import checkbox_label
from .options import GiftWrapSettings

logger = logging.getLogger(__name__)

CART_ENDPOINT = "cart"
CHECKOUT_ENDPOINT = "checkout"


def get_extension_schema() -> dict:
    """Schema of the extension data under the gift wrap namespace."""
    return {
        conf.get_field_name(): {
            "description": "Whether gift wrap is requested.",
            "type": "boolean",
            "context": ["view", "edit"],
            "readonly": False,
            "default": False,
        },
    }


def get_extension_data(preference: bool) -> dict:
    return {conf.get_field_name(): bool(preference)}


@dataclass(frozen=True)
class AdditionalField:
    """Checkbox registered on the checkout form."""

    id: str
    label: str
    default: bool
    meta_key: str
    type: str = "checkbox"
    location: str = "order"
    required: bool = False

    @classmethod
    def build(cls, settings: GiftWrapSettings, preference: bool) -> "AdditionalField":
        return cls(
            id=conf.get_additional_field_id(),
            label=checkbox_label(settings),
            default=bool(preference),
            meta_key=conf.get_order_meta_key(),
        )

    def as_dict(self) -> dict:
        return asdict(self)


def register_store_api_extension(registry, service, request=None) -> bool:
    """Register extension data and the additional field with the host.

    ``registry`` is the host's Store API schema registry, exposing
    ``register_endpoint_data(...)`` and optionally
    ``register_additional_field(dict)``. Failures are logged and swallowed:
    the rest of checkout keeps working without the gift wrap data.

    Returns:
        True if registration completed
    """
    if registry is None:
        return False

    def data_callback(req=None):
        session = service.sessions.load(req if req is not None else request)
        return get_extension_data(service.engine.current(session))

    try:
        for endpoint in (CHECKOUT_ENDPOINT, CART_ENDPOINT):
            registry.register_endpoint_data(
                endpoint=endpoint,
                namespace=conf.get_namespace(),
                data_callback=data_callback,
                schema_callback=get_extension_schema,
            )

        if hasattr(registry, "register_additional_field"):
            session = service.sessions.load(request) if request is not None else None
            field = AdditionalField.build(service.settings.get(), service.engine.current(session))
            registry.register_additional_field(field.as_dict())
    except Exception as e:
        logger.exception(f"Store API extension registration failed: {e}")
        return False

    logger.debug("Store API extension registered")
    return True
