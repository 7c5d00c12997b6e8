"""Tests for the gift wrap storefront API and settings page."""

from decimal import Decimal

import pytest
from django.apps import apps
from django.contrib.auth import get_user_model
from django.test import Client
from django.urls import reverse

from ..models import Option
from .fakes import CARTS

User = get_user_model()


@pytest.fixture
def disabled_app(monkeypatch):
    """The app as left by ready() when a dependency is missing."""
    monkeypatch.setattr(apps.get_app_config("giftwrap"), "service", None)


@pytest.fixture
def staff_client(db):
    user = User.objects.create_user(username="shopkeeper", password="testpass123", is_staff=True)
    client = Client()
    client.force_login(user)
    return client


@pytest.mark.django_db
class TestStatusEndpoint:

    def test_fresh_session_is_off(self, api_client):
        response = api_client.get("/gift-wrap/status")

        assert response.status_code == 200
        assert response.json() == {"enabled": False}

    def test_unavailable(self, api_client, disabled_app):
        response = api_client.get(reverse("giftwrap:status"))

        assert response.status_code == 503
        assert response.json() == {"error": "Gift wrap is unavailable"}


@pytest.mark.django_db
class TestToggleEndpoint:

    def test_toggle_on_adds_fee_and_persists(self, api_client):
        """Toggle on, the cart gets one non-taxable fee, status reflects it."""
        response = api_client.post("/gift-wrap/toggle", {"enabled": True}, format="json")

        assert response.status_code == 200
        assert response.json() == {"success": True, "gift_wrap": True}

        [cart] = CARTS.values()
        assert cart.passes == 1
        assert [(f.label, f.amount, f.taxable) for f in cart.fees] == [
            ("Confezione regalo", Decimal("1.50"), False)
        ]

        assert api_client.get("/gift-wrap/status").json() == {"enabled": True}

    def test_toggle_off(self, api_client):
        api_client.post("/gift-wrap/toggle", {"enabled": True}, format="json")

        response = api_client.post("/gift-wrap/toggle", {"enabled": False}, format="json")

        assert response.json() == {"success": True, "gift_wrap": False}
        assert api_client.get("/gift-wrap/status").json() == {"enabled": False}
        [cart] = CARTS.values()
        assert cart.fees == []

    def test_missing_enabled_is_rejected(self, api_client):
        response = api_client.post("/gift-wrap/toggle", {}, format="json")

        assert response.status_code == 400
        assert "enabled" in response.json()

    def test_get_not_allowed(self, api_client):
        assert api_client.get("/gift-wrap/toggle").status_code == 405

    def test_unavailable(self, api_client, disabled_app):
        response = api_client.post("/gift-wrap/toggle", {"enabled": True}, format="json")

        assert response.status_code == 503


@pytest.mark.django_db
class TestFrontendSettingsEndpoint:

    def test_defaults(self, api_client):
        response = api_client.get("/gift-wrap/settings")

        assert response.status_code == 200
        assert response.json() == {
            "sectionTitle": "Extra",
            "label": "Confezione regalo",
            "feeFormatted": "€1.50",
            "checkboxLabel": "Confezione regalo (+€1.50)",
            "featureEnabled": True,
        }

    def test_reflects_stored_options(self, api_client):
        Option.objects.create(key="eva_gift_wrap_enabled", value="no")
        Option.objects.create(key="eva_gift_wrap_fee", value="2.5")

        data = api_client.get("/gift-wrap/settings").json()

        assert data["featureEnabled"] is False
        assert data["feeFormatted"] == "€2.50"

    def test_oversized_stored_fee_uses_default(self, api_client):
        Option.objects.create(key="eva_gift_wrap_fee", value="1e30")

        response = api_client.get("/gift-wrap/settings")

        assert response.status_code == 200
        assert response.json()["feeFormatted"] == "€1.50"


@pytest.mark.django_db
class TestSettingsPage:

    url = "/gift-wrap/admin/settings/"

    def test_anonymous_redirected_to_login(self, client):
        response = client.get(self.url)

        assert response.status_code == 302
        assert "login" in response.url

    def test_customer_forbidden(self, client):
        user = User.objects.create_user(username="shopper", password="testpass123")
        client.force_login(user)

        assert client.get(self.url).status_code == 403

    def test_staff_sees_current_values(self, staff_client):
        response = staff_client.get(self.url)

        assert response.status_code == 200
        assert response.context["form"].initial["label"] == "Confezione regalo"

    def test_staff_saves_settings(self, staff_client, api_client):
        response = staff_client.post(self.url, {
            "enabled": "on",
            "section_title": "Extra",
            "label": "Pacchetto regalo",
            "fee_amount": "3.00",
            "custom_style": ".eva-gift-wrap-option { color: red; }",
        })

        assert response.status_code == 302
        assert Option.objects.get(key="eva_gift_wrap_label").value == "Pacchetto regalo"
        assert Option.objects.get(key="eva_gift_wrap_fee").value == "3.00"
        assert api_client.get("/gift-wrap/settings").json()["checkboxLabel"] == "Pacchetto regalo (+€3.00)"

    def test_negative_fee_rejected(self, staff_client):
        response = staff_client.post(self.url, {
            "section_title": "Extra",
            "label": "Confezione regalo",
            "fee_amount": "-1",
        })

        assert response.status_code == 200
        assert response.context["form"].errors["fee_amount"]
        assert not Option.objects.filter(key="eva_gift_wrap_fee").exists()
