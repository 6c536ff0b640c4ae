# storefront/handlers/order_handler.py
from typing import Any, Optional
from .base_handler import BaseHandler, Response
from ..models.user import AuthUser
from ..services.order_service import OrderService

class OrderHandler(BaseHandler):
    """Order listing and admin status updates"""

    def __init__(self, order_service: OrderService):
        super().__init__()
        self.order_service = order_service

    async def get_orders(self, user: Optional[AuthUser]) -> Response:
        """The caller's own orders"""
        try:
            user = self.require_user(user)
            orders = await self.order_service.get_user_orders(user.id)
        except Exception as e:
            return self.fail(e, "Error while getting orders")

        return self.respond(200, "Orders retrieved successfully",
                            orders=[o.to_response() for o in orders])

    async def get_all_orders(self, user: Optional[AuthUser]) -> Response:
        try:
            self.require_admin(user)
            orders = await self.order_service.get_all_orders()
        except Exception as e:
            return self.fail(e, "Error while getting orders")

        return self.respond(200, "All orders retrieved successfully",
                            orders=[o.to_response() for o in orders])

    async def update_order_status(self, user: Optional[AuthUser], order_id: Any,
                                  status: Any) -> Response:
        try:
            self.require_admin(user)
            order = await self.order_service.update_order_status(order_id, status)
        except Exception as e:
            return self.fail(e, "Error while updating order")

        return self.respond(200, "Order status updated successfully", order=order.to_response())
