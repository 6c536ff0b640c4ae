# storefront/services/checkout_service.py
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import ValidationError as ModelValidationError
from .order_service import OrderService
from ..exceptions import (
    AuthRequiredError,
    GatewayError,
    PersistenceError,
    ValidationError,
)
from ..models.order import CartItem
from ..models.user import AuthUser

class CheckoutService:
    """Takes a cart through the payment gateway and records the order.

    The gateway client is shared process-wide and injected here.
    """

    def __init__(self, gateway, order_service: OrderService):
        self.gateway = gateway
        self.order_service = order_service
        self.logger = logging.getLogger(__name__)

    async def generate_client_token(self) -> str:
        try:
            return await self.gateway.generate_client_token()
        except GatewayError as e:
            self.logger.error(f"Client token generation failed: {e.error}")
            raise

    async def process_payment(self, nonce: Optional[str], cart: Optional[List[Dict[str, Any]]],
                              user: Optional[AuthUser]) -> Dict[str, Any]:
        """Charge the cart total and record the order on success"""
        if not nonce:
            raise ValidationError("Payment nonce is required")

        if not cart:
            raise ValidationError("Cart is required and cannot be empty")

        if user is None:
            raise AuthRequiredError()

        total = self.cart_total(cart)

        result = await self.gateway.sale(amount=total, nonce=nonce)
        if not result.success:
            self.logger.warning(f"Payment of {total} declined for buyer {user.id}: {result.message}")
            raise GatewayError("Payment processing failed", error=result.message)

        transaction_id = (result.transaction or {}).get("id")
        self.logger.info(f"Payment {transaction_id} of {total} captured for buyer {user.id}")

        try:
            order = await self.order_service.create_order(
                buyer_id=user.id,
                products=[dict(item) for item in cart],
                payment=result.raw
            )
        except PersistenceError as e:
            # Money has moved; keep enough in the log to reconcile by hand
            self.logger.error(
                f"Payment {transaction_id} captured but order was not recorded "
                f"(buyer {user.id}, amount {total}): {e.error}"
            )
            raise PersistenceError(
                "Payment processed but the order could not be recorded",
                error=e.error,
                payload={'transaction': result.raw}
            )

        return {
            'transaction': result.raw,
            'order': order,
        }

    @staticmethod
    def cart_total(cart: List[Dict[str, Any]]) -> Decimal:
        """Sum of the cart's item prices"""
        total = Decimal(0)
        for item in cart:
            try:
                total += CartItem.model_validate(item).price
            except ModelValidationError as e:
                raise ValidationError("Every cart item needs a valid price", error=str(e))
        return total
