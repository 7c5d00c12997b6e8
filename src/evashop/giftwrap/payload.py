"""Gift wrap signals carried by Store API request payloads.

A checkout or cart-update payload may carry the preference in two places:

- ``additional_fields["eva/gift-wrap"]``: the additional checkout field
- ``extensions["eva"]["gift_wrap"]``: free-form extension data

Each is read as a tri-state so an explicit ``false`` is never confused with
a missing key.
"""

import enum
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple

from . import conf

FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})

_MISSING = object()


class Tristate(enum.Enum):
    """A boolean that may also be absent."""

    ABSENT = "absent"
    FALSE = "false"
    TRUE = "true"

    @classmethod
    def of(cls, value) -> "Tristate":
        """Coerce a payload value; None counts as absent."""
        if value is None or value is _MISSING:
            return cls.ABSENT
        return cls.TRUE if coerce_bool(value) else cls.FALSE

    @property
    def is_present(self) -> bool:
        return self is not Tristate.ABSENT

    def value_or(self, default: bool) -> bool:
        if self is Tristate.ABSENT:
            return default
        return self is Tristate.TRUE


def coerce_bool(value) -> bool:
    """Truthiness, except that common "off" strings are False."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def _lookup(data, *keys):
    """Walk nested mappings, returning _MISSING at the first gap."""
    for key in keys:
        if not isinstance(data, Mapping) or key not in data:
            return _MISSING
        data = data[key]
    return data


class Resolution(NamedTuple):
    """Outcome of applying precedence to the signals."""

    value: bool
    source: str  # "additional_field", "extension" or "session"


@dataclass(frozen=True)
class GiftWrapSignals:
    """The two payload signals for one request."""

    additional_field: Tristate = Tristate.ABSENT
    extension: Tristate = Tristate.ABSENT

    @classmethod
    def from_payload(cls, payload: Any) -> "GiftWrapSignals":
        """Extract both signals from a request payload.

        Anything that is not a mapping yields two absent signals.
        """
        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            additional_field=Tristate.of(
                _lookup(payload, "additional_fields", conf.get_additional_field_id())
            ),
            extension=Tristate.of(
                _lookup(payload, "extensions", conf.get_namespace(), conf.get_field_name())
            ),
        )

    @property
    def any_present(self) -> bool:
        return self.additional_field.is_present or self.extension.is_present

    def resolve(self, fallback: bool | None = None) -> Resolution | None:
        """Apply precedence: additional field > extension data > fallback.

        Returns None when neither signal is present and no fallback is given.
        """
        if self.additional_field.is_present:
            return Resolution(self.additional_field.value_or(False), "additional_field")
        if self.extension.is_present:
            return Resolution(self.extension.value_or(False), "extension")
        if fallback is None:
            return None
        return Resolution(bool(fallback), "session")
