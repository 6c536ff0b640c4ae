"""Shared pytest fixtures for storefront tests."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from storefront.models.payment import GatewayResult
from storefront.models.user import AuthUser


NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakePool:
    """Stands in for an asyncpg pool; every acquire yields the same connection."""

    def __init__(self, conn):
        self.conn = conn

    @asynccontextmanager
    async def acquire(self):
        yield self.conn


class FakeDatabase:
    def __init__(self, conn):
        self.pool = FakePool(conn)


@pytest.fixture
def conn():
    """Connection double; tests set return values on fetch/fetchrow/fetchval."""
    connection = AsyncMock()
    connection.fetch.return_value = []
    connection.fetchrow.return_value = None
    connection.fetchval.return_value = None
    return connection


@pytest.fixture
def db(conn):
    return FakeDatabase(conn)


def product_row(**overrides):
    row = {
        "product_id": 1,
        "name": "Gaming Laptop",
        "slug": "gaming-laptop",
        "description": "A fast laptop",
        "price": Decimal("1200.00"),
        "category_id": 3,
        "quantity": 10,
        "shipping": True,
        "has_photo": False,
        "created_at": NOW,
        "updated_at": None,
        "category_name": "Electronics",
        "category_slug": "electronics",
    }
    row.update(overrides)
    return row


def category_row(**overrides):
    row = {
        "category_id": 3,
        "name": "Electronics",
        "slug": "electronics",
        "description": None,
        "is_active": True,
        "created_at": NOW,
        "updated_at": None,
    }
    row.update(overrides)
    return row


def order_row(**overrides):
    row = {
        "order_id": 7,
        "buyer_id": 42,
        "products": [{"price": 50}, {"price": 30}],
        "payment": {"success": True, "transaction": {"id": "tx_1"}},
        "status": "Not Process",
        "created_at": NOW,
        "updated_at": None,
    }
    row.update(overrides)
    return row


@pytest.fixture
def product_fields():
    return {
        "name": "Gaming Laptop",
        "description": "A fast laptop",
        "price": "1200",
        "category": "3",
        "quantity": "10",
        "shipping": "true",
    }


@pytest.fixture
def buyer():
    return AuthUser(id=42, role=0)


@pytest.fixture
def admin():
    return AuthUser(id=1, role=1)


@pytest.fixture
def gateway():
    """Gateway double with a successful sale by default."""
    fake = AsyncMock()
    fake.generate_client_token.return_value = "client-token-123"
    fake.sale.return_value = GatewayResult(
        success=True,
        transaction={"id": "tx_1", "status": "submitted_for_settlement"},
    )
    return fake
