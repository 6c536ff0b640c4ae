# storefront/services/order_service.py
from typing import Any, Dict, List
from .base_service import BaseService
from ..exceptions import NotFoundError, ValidationError
from ..models.order import Order, OrderStatus

ORDER_COLUMNS = """
    order_id, buyer_id, products, payment, status, created_at, updated_at
"""

class OrderService(BaseService):
    """Order records: creation after payment and admin status changes"""

    async def create_order(self, buyer_id: int, products: List[Dict[str, Any]],
                           payment: Dict[str, Any]) -> Order:
        """Record a paid cart"""
        async with self.connection() as conn:
            row = await conn.fetchrow(f"""
                INSERT INTO orders (buyer_id, products, payment, status)
                VALUES ($1, $2, $3, $4)
                RETURNING {ORDER_COLUMNS}
            """, buyer_id, products, payment, OrderStatus.NOT_PROCESSED.value)

        order = Order.from_record(row)
        self.logger.info(f"Order {order.order_id} created for buyer {buyer_id}")
        return order

    async def get_user_orders(self, buyer_id: int) -> List[Order]:
        """A buyer's orders, newest first"""
        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE buyer_id = $1
                ORDER BY created_at DESC, order_id DESC
            """, buyer_id)
        return [Order.from_record(row) for row in rows]

    async def get_all_orders(self) -> List[Order]:
        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                ORDER BY created_at DESC, order_id DESC
            """)
        return [Order.from_record(row) for row in rows]

    async def update_order_status(self, order_id: Any, status: Any) -> Order:
        """Move an order to another status"""
        try:
            status = OrderStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(f"Order status must be one of: {allowed}")

        order_id = self.parse_id(order_id, "Order not found")

        async with self.connection() as conn:
            row = await conn.fetchrow(f"""
                UPDATE orders
                SET status = $1, updated_at = CURRENT_TIMESTAMP
                WHERE order_id = $2
                RETURNING {ORDER_COLUMNS}
            """, status.value, order_id)

        if row is None:
            raise NotFoundError("Order not found")

        self.logger.info(f"Order {order_id} status changed to {status.value!r}")
        return Order.from_record(row)
