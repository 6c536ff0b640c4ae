# storefront/handlers/payment_handler.py
from typing import Any, Dict, Optional
from .base_handler import BaseHandler, Response
from ..models.user import AuthUser
from ..services.checkout_service import CheckoutService

class PaymentHandler(BaseHandler):
    """Braintree token and checkout endpoints"""

    def __init__(self, checkout_service: CheckoutService):
        super().__init__()
        self.checkout_service = checkout_service

    async def get_client_token(self) -> Response:
        try:
            token = await self.checkout_service.generate_client_token()
        except Exception as e:
            return self.fail(e, "Error generating payment token")

        return self.respond(200, "Payment token generated successfully", clientToken=token)

    async def process_payment(self, body: Optional[Dict[str, Any]], user: Optional[AuthUser]) -> Response:
        """``body`` carries ``nonce`` and ``cart`` as posted by the client"""
        body = body or {}
        try:
            result = await self.checkout_service.process_payment(
                nonce=body.get('nonce'),
                cart=body.get('cart'),
                user=user
            )
        except Exception as e:
            return self.fail(e, "Error processing payment")

        return self.respond(
            200, "Payment processed successfully",
            transaction=result['transaction'],
            order=result['order'].to_response()
        )
