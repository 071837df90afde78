"""Pytest fixtures for storefront tests."""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from apps.catalog.models import Product


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username='alice', email='alice@example.com', password='secret',
    )


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(
        username='bob', email='bob@example.com', password='secret',
    )


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(
        username='admin', email='admin@example.com', password='secret', is_staff=True,
    )


@pytest.fixture
def make_product(db):
    """Factory for catalog products."""

    def _make(title='Widget', price='10.00', **extra):
        extra.setdefault('description', '{} description'.format(title))
        return Product.objects.create(title=title, price=Decimal(price), **extra)

    return _make


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def staff_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client
