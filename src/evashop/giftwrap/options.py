"""Gift wrap settings store.

Typed, defaulted access to the gift wrap options kept in a flat key-value
record. Reads never raise: missing, malformed or unreadable values fall back
to the documented defaults.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Any, Mapping, Protocol

from django.db import DatabaseError

logger = logging.getLogger(__name__)

OPTION_ENABLED = "eva_gift_wrap_enabled"
OPTION_SECTION_TITLE = "eva_gift_wrap_section_title"
OPTION_LABEL = "eva_gift_wrap_label"
OPTION_FEE = "eva_gift_wrap_fee"
OPTION_CUSTOM_CSS = "eva_gift_wrap_custom_css"

DEFAULT_SECTION_TITLE = "Extra"
DEFAULT_LABEL = "Confezione regalo"
DEFAULT_FEE = Decimal("1.50")

TRUE_STRINGS = frozenset({"yes", "1", "true", "on"})


def round_money(amount: Decimal, places: int = 2) -> Decimal:
    """Round to specified decimal places using banker's rounding."""
    quantize_str = "0." + "0" * places
    return amount.quantize(Decimal(quantize_str), rounding=ROUND_HALF_EVEN)


class OptionBackend(Protocol):
    """Key-value config service the settings store reads from."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class DatabaseOptions:
    """Options persisted in the ``Option`` table."""

    def get(self, key, default=None):
        from .models import Option

        row = Option.objects.filter(key=key).values_list("value", flat=True).first()
        return default if row is None else row

    def set(self, key, value):
        from .models import Option

        Option.objects.update_or_create(key=key, defaults={"value": "" if value is None else str(value)})


class MemoryOptions:
    """In-process options, for tests and scripts."""

    def __init__(self, initial: Mapping[str, Any] | None = None):
        self.values = dict(initial or {})

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value):
        self.values[key] = value


@dataclass(frozen=True)
class GiftWrapSettings:
    """Gift wrap configuration as seen by the rest of the app."""

    enabled: bool = True
    section_title: str = DEFAULT_SECTION_TITLE
    label: str = DEFAULT_LABEL
    fee_amount: Decimal = DEFAULT_FEE
    custom_style: str = ""


def coerce_enabled(value) -> bool:
    """Checkbox options are stored as "yes"/"no"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return False


def coerce_text(value, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def coerce_fee(value) -> Decimal:
    """Coerce a stored fee to a non-negative 2-place Decimal.

    Non-numeric, NaN, infinite and unrepresentably large values fall back
    to the default fee; negative amounts clamp to zero.
    """
    if isinstance(value, bool) or value is None:
        return DEFAULT_FEE
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return DEFAULT_FEE
    if not amount.is_finite():
        return DEFAULT_FEE
    if amount < 0:
        return Decimal("0.00")
    try:
        return round_money(amount)
    except InvalidOperation:
        return DEFAULT_FEE


class SettingsStore:
    """Reads and writes ``GiftWrapSettings`` over an option backend."""

    FIELDS = {
        "enabled": OPTION_ENABLED,
        "section_title": OPTION_SECTION_TITLE,
        "label": OPTION_LABEL,
        "fee_amount": OPTION_FEE,
        "custom_style": OPTION_CUSTOM_CSS,
    }

    def __init__(self, backend: OptionBackend):
        self.backend = backend

    def _read(self, key, default):
        try:
            return self.backend.get(key, default)
        except DatabaseError as e:
            logger.warning(f"Option {key} unreadable, using default: {e}")
            return default
        except Exception as e:
            logger.exception(f"Option backend failed reading {key}: {e}")
            return default

    def get(self) -> GiftWrapSettings:
        """Get the current settings; never raises."""
        custom_style = self._read(OPTION_CUSTOM_CSS, "")
        return GiftWrapSettings(
            enabled=coerce_enabled(self._read(OPTION_ENABLED, "yes")),
            section_title=coerce_text(self._read(OPTION_SECTION_TITLE, DEFAULT_SECTION_TITLE), DEFAULT_SECTION_TITLE),
            label=coerce_text(self._read(OPTION_LABEL, DEFAULT_LABEL), DEFAULT_LABEL),
            fee_amount=coerce_fee(self._read(OPTION_FEE, DEFAULT_FEE)),
            custom_style=custom_style.strip() if isinstance(custom_style, str) else "",
        )

    def set(self, partial: Mapping[str, Any]) -> None:
        """Write the named fields.

        Raises:
            KeyError: If a field name is not part of ``GiftWrapSettings``
        """
        for name, value in partial.items():
            key = self.FIELDS[name]
            if name == "enabled":
                value = "yes" if coerce_enabled(value) else "no"
            elif name == "fee_amount":
                value = str(coerce_fee(value))
            self.backend.set(key, value)
