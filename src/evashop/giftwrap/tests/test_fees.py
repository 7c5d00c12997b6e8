"""Tests for the gift wrap fee applicator."""

from decimal import Decimal

import pytest
from django.test import RequestFactory, override_settings
from django.utils import translation

from ..fees import ExecutionContext, FeeApplicator, FeeLine, checkbox_label, format_fee
from ..options import GiftWrapSettings
from .fakes import FakeCart


@pytest.fixture
def applicator():
    return FeeApplicator()


@pytest.fixture
def plain_cart():
    """A cart that does not notify listeners."""
    return FakeCart()


class TestApply:

    def test_adds_one_non_taxable_line(self, applicator, plain_cart):
        fee = applicator.apply(plain_cart, GiftWrapSettings(), True)

        assert plain_cart.fees == [fee]
        assert fee.label == "Confezione regalo"
        assert fee.amount == Decimal("1.50")
        assert fee.taxable is False

    def test_idempotent_within_a_pass(self, applicator, plain_cart):
        """Calling twice with the same inputs yields one line."""
        first = applicator.apply(plain_cart, GiftWrapSettings(), True)
        second = applicator.apply(plain_cart, GiftWrapSettings(), True)

        assert len(plain_cart.fees) == 1
        assert second == first

    def test_no_fee_without_preference(self, applicator, plain_cart):
        assert applicator.apply(plain_cart, GiftWrapSettings(), False) is None
        assert plain_cart.fees == []

    @pytest.mark.parametrize("preference", [True, False])
    def test_disabled_feature_never_adds(self, applicator, plain_cart, preference):
        applicator.apply(plain_cart, GiftWrapSettings(enabled=False), preference)

        assert plain_cart.fees == []

    def test_admin_context_skipped(self, applicator, plain_cart):
        context = ExecutionContext(is_admin=True)

        assert applicator.apply(plain_cart, GiftWrapSettings(), True, context) is None
        assert plain_cart.fees == []

    def test_admin_background_recalculation_applies(self, applicator, plain_cart):
        context = ExecutionContext(is_admin=True, is_background=True)

        applicator.apply(plain_cart, GiftWrapSettings(), True, context)

        assert len(plain_cart.fees) == 1

    def test_configured_label_and_amount(self, applicator, plain_cart):
        settings = GiftWrapSettings(label="Gift box", fee_amount=Decimal("3.00"))

        fee = applicator.apply(plain_cart, settings, True)

        assert fee == FeeLine(id="gift-box", label="Gift box", amount=Decimal("3.00"), taxable=False)

    def test_label_markup_stripped(self, applicator, plain_cart):
        settings = GiftWrapSettings(label="<b>Gift</b> wrap")

        fee = applicator.apply(plain_cart, settings, True)

        assert fee.label == "Gift wrap"

    def test_markup_only_label_uses_default(self, applicator, plain_cart):
        fee = applicator.apply(plain_cart, GiftWrapSettings(label="<b></b>"), True)

        assert fee.label == "Confezione regalo"
        assert fee.id == "confezione-regalo"

    def test_as_dict(self):
        fee = FeeLine.for_settings(GiftWrapSettings())

        assert fee.as_dict() == {
            "id": "confezione-regalo",
            "label": "Confezione regalo",
            "amount": "1.50",
            "taxable": False,
        }


class TestExecutionContext:

    def test_storefront_request(self):
        context = ExecutionContext.from_request(RequestFactory().get("/checkout/"))

        assert context == ExecutionContext(is_admin=False, is_background=False)
        assert context.customer_facing

    def test_admin_page(self):
        context = ExecutionContext.from_request(RequestFactory().get("/admin/orders/"))

        assert context.is_admin
        assert not context.customer_facing

    def test_admin_xhr_is_background(self):
        request = RequestFactory().get("/admin/orders/", HTTP_X_REQUESTED_WITH="XMLHttpRequest")

        context = ExecutionContext.from_request(request)

        assert context.is_admin and context.is_background
        assert context.customer_facing

    @override_settings(GIFT_WRAP={"ADMIN_PATH_PREFIX": "/backoffice/"})
    def test_configurable_admin_prefix(self):
        assert ExecutionContext.from_request(RequestFactory().get("/backoffice/")).is_admin
        assert not ExecutionContext.from_request(RequestFactory().get("/admin/")).is_admin

    def test_no_request_is_customer_facing(self):
        assert ExecutionContext.from_request(None).customer_facing


class TestFormatting:

    def test_italian_format(self):
        with translation.override("it"):
            assert format_fee(Decimal("1.50")) == "€1,50"
            assert checkbox_label(GiftWrapSettings()) == "Confezione regalo (+€1,50)"

    def test_english_format(self):
        with translation.override("en"):
            assert format_fee(Decimal("1.5"), symbol="$") == "$1.50"
