"""Gift wrap app configuration."""

from django.conf import settings

DEFAULTS = {
    # Store API extension data lives under extensions[NAMESPACE][FIELD_NAME]
    'NAMESPACE': 'eva',
    'FIELD_NAME': 'gift_wrap',

    # Additional checkout field (additional_fields[ADDITIONAL_FIELD_ID])
    'ADDITIONAL_FIELD_ID': 'eva/gift-wrap',

    # Persisted state
    'SESSION_KEY': 'gift_wrap',
    'ORDER_META_KEY': '_eva_gift_wrap',

    # Pluggable collaborators (dotted paths)
    'OPTIONS_BACKEND': 'evashop.giftwrap.options.DatabaseOptions',
    'ORDER_META_STORE': 'evashop.giftwrap.orders.ModelOrderMetaStore',
    'CART_LOADER': None,  # callable(request, session) -> cart or None

    # Requests under this prefix are administrative (no fee unless XHR)
    'ADMIN_PATH_PREFIX': '/admin/',

    # Fee formatting
    'CURRENCY_SYMBOL': '€',
}


def get_config():
    """Get gift wrap configuration from settings."""
    user_config = getattr(settings, 'GIFT_WRAP', None) or {}
    return {**DEFAULTS, **user_config}


def get_setting(name, default=None):
    """Get a specific gift wrap setting."""
    config = get_config()
    return config.get(name, default)


def get_namespace():
    """Get the Store API extension namespace."""
    return get_setting('NAMESPACE', DEFAULTS['NAMESPACE'])


def get_field_name():
    """Get the Store API extension field name."""
    return get_setting('FIELD_NAME', DEFAULTS['FIELD_NAME'])


def get_additional_field_id():
    """Get the additional checkout field identifier."""
    return get_setting('ADDITIONAL_FIELD_ID', DEFAULTS['ADDITIONAL_FIELD_ID'])


def get_session_key():
    """Get the session key holding the preference."""
    return get_setting('SESSION_KEY', DEFAULTS['SESSION_KEY'])


def get_order_meta_key():
    """Get the order metadata key for the snapshot."""
    return get_setting('ORDER_META_KEY', DEFAULTS['ORDER_META_KEY'])
