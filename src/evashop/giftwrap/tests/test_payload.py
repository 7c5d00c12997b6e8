"""Tests for reading gift wrap signals out of request payloads."""

import pytest

from ..payload import GiftWrapSignals, Tristate, coerce_bool


def payload(additional=..., extension=...):
    data = {}
    if additional is not ...:
        data["additional_fields"] = {"eva/gift-wrap": additional}
    if extension is not ...:
        data["extensions"] = {"eva": {"gift_wrap": extension}}
    return data


class TestTristate:

    def test_absent_vs_false(self):
        """An explicit false is present; None is absent."""
        assert Tristate.of(False) is Tristate.FALSE
        assert Tristate.of(False).is_present
        assert Tristate.of(None) is Tristate.ABSENT
        assert not Tristate.of(None).is_present

    @pytest.mark.parametrize("value,expected", [
        (True, True),
        (1, True),
        ("1", True),
        ("yes", True),
        ("on", True),
        (False, False),
        (0, False),
        ("0", False),
        ("false", False),
        ("FALSE", False),
        ("", False),
        ([], False),
    ])
    def test_coercion(self, value, expected):
        assert coerce_bool(value) is expected

    def test_value_or(self):
        assert Tristate.ABSENT.value_or(True) is True
        assert Tristate.FALSE.value_or(True) is False
        assert Tristate.TRUE.value_or(False) is True


class TestFromPayload:

    def test_both_present(self):
        signals = GiftWrapSignals.from_payload(payload(additional=False, extension=True))

        assert signals.additional_field is Tristate.FALSE
        assert signals.extension is Tristate.TRUE

    def test_only_extension(self):
        signals = GiftWrapSignals.from_payload(payload(extension=True))

        assert signals.additional_field is Tristate.ABSENT
        assert signals.extension is Tristate.TRUE

    def test_empty_payload(self):
        signals = GiftWrapSignals.from_payload({})

        assert not signals.any_present

    @pytest.mark.parametrize("bad", [None, "gift_wrap=1", ["extensions"], 42])
    def test_non_mapping_payload(self, bad):
        assert GiftWrapSignals.from_payload(bad) == GiftWrapSignals()

    def test_malformed_nesting(self):
        """Wrong shapes at any level read as absent."""
        signals = GiftWrapSignals.from_payload({
            "extensions": {"eva": "gift_wrap"},
            "additional_fields": ["eva/gift-wrap"],
        })

        assert signals == GiftWrapSignals()

    def test_other_namespace_ignored(self):
        signals = GiftWrapSignals.from_payload({"extensions": {"other": {"gift_wrap": True}}})

        assert signals.extension is Tristate.ABSENT


class TestResolve:
    """Precedence: additional field > extension data > fallback."""

    def test_additional_field_false_beats_extension_true(self):
        resolution = GiftWrapSignals(Tristate.FALSE, Tristate.TRUE).resolve(fallback=True)

        assert resolution.value is False
        assert resolution.source == "additional_field"

    def test_extension_used_when_field_absent(self):
        resolution = GiftWrapSignals(Tristate.ABSENT, Tristate.TRUE).resolve(fallback=False)

        assert resolution.value is True
        assert resolution.source == "extension"

    def test_fallback_when_nothing_present(self):
        resolution = GiftWrapSignals().resolve(fallback=True)

        assert resolution.value is True
        assert resolution.source == "session"

    def test_nothing_to_resolve(self):
        assert GiftWrapSignals().resolve() is None
