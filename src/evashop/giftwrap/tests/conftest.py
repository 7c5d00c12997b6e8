"""Shared pytest fixtures for giftwrap tests."""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from .. import hooks
from ..options import MemoryOptions
from ..orders import MemoryOrderMetaStore
from ..service import build_service
from . import fakes


@pytest.fixture(autouse=True)
def reset_carts():
    """Each test starts without host carts."""
    fakes.CARTS.clear()
    yield
    fakes.CARTS.clear()


@pytest.fixture
def options():
    return MemoryOptions()


@pytest.fixture
def order_meta():
    return MemoryOrderMetaStore()


@pytest.fixture
def service(options, order_meta):
    """A service on in-memory collaborators, wired to the host signals."""
    svc = build_service(options=options, order_meta_store=order_meta, cart_loader=fakes.load_cart)
    hooks.connect(svc)
    yield svc
    # Restore the app's own wiring
    app_service = apps.get_app_config("giftwrap").service
    if app_service is not None:
        hooks.connect(app_service)


@pytest.fixture
def session():
    return fakes.FakeSession()


@pytest.fixture
def cart(session):
    """A host cart bound to the test session."""
    return fakes.FakeCart(session=session)


@pytest.fixture
def api_client():
    """Return a DRF test client."""
    return APIClient()
