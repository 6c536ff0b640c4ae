"""Tests for order records."""

import pytest

from storefront.exceptions import NotFoundError, ValidationError
from storefront.models.order import OrderStatus
from storefront.services.order_service import OrderService

from .conftest import order_row


@pytest.fixture
def service(db):
    return OrderService(db)


async def test_create_order(service, conn):
    conn.fetchrow.return_value = order_row()
    cart = [{"price": 50}, {"price": 30}]
    payment = {"success": True, "transaction": {"id": "tx_1"}}

    order = await service.create_order(buyer_id=42, products=cart, payment=payment)

    assert conn.fetchrow.call_args.args[1:] == (42, cart, payment, "Not Process")
    assert order.status == OrderStatus.NOT_PROCESSED
    assert order.buyer_id == 42


async def test_buyer_orders(service, conn):
    conn.fetch.return_value = [order_row(), order_row(order_id=8, status="deliverd")]

    orders = await service.get_user_orders(42)

    assert conn.fetch.call_args.args[1] == 42
    assert orders[1].status == OrderStatus.DELIVERED


async def test_all_orders(service, conn):
    conn.fetch.return_value = [order_row(buyer_id=1), order_row(order_id=8, buyer_id=2)]

    orders = await service.get_all_orders()

    assert {o.buyer_id for o in orders} == {1, 2}


@pytest.mark.parametrize("status", ["Processing", "Shipped", "deliverd", "cancel"])
async def test_update_status(service, conn, status):
    conn.fetchrow.return_value = order_row(status=status)

    order = await service.update_order_status("7", status)

    assert conn.fetchrow.call_args.args[1:] == (status, 7)
    assert order.status.value == status


async def test_update_status_rejects_unknown_value(service, conn):
    with pytest.raises(ValidationError):
        await service.update_order_status(7, "Delivered")

    conn.fetchrow.assert_not_called()


async def test_update_status_unknown_order(service, conn):
    with pytest.raises(NotFoundError):
        await service.update_order_status(99, "Shipped")
