# storefront/services/payment_service.py
import asyncio
import logging
import braintree
from braintree.exceptions.braintree_error import BraintreeError
from decimal import Decimal
from typing import Any, Dict, Optional
from ..config import Config
from ..exceptions import GatewayError
from ..models.payment import GatewayResult

ENVIRONMENTS = {
    "sandbox": braintree.Environment.Sandbox,
    "production": braintree.Environment.Production,
}

# Statuses of a sale whose money is authorized or on its way to settlement
CAPTURED_STATUSES = frozenset({
    braintree.Transaction.Status.Authorized,
    braintree.Transaction.Status.SubmittedForSettlement,
    braintree.Transaction.Status.SettlementPending,
    braintree.Transaction.Status.Settling,
    braintree.Transaction.Status.Settled,
})

class BraintreeGateway:
    """Async wrapper around the Braintree SDK.

    Built once per process from credentials and shared by every checkout.
    SDK calls block, so each one runs in a worker thread.
    """

    def __init__(self, merchant_id: str, public_key: str, private_key: str,
                 environment: str = "sandbox", timeout: Optional[float] = None):
        if environment not in ENVIRONMENTS:
            raise ValueError(f"Unknown Braintree environment: {environment}")

        self.merchant_id = merchant_id
        self.environment = environment
        self.client = braintree.BraintreeGateway(
            braintree.Configuration(
                ENVIRONMENTS[environment],
                merchant_id=merchant_id,
                public_key=public_key,
                private_key=private_key,
                timeout=timeout or Config.GATEWAY_TIMEOUT
            )
        )
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls) -> "BraintreeGateway":
        return cls(
            merchant_id=Config.BRAINTREE_MERCHANT_ID,
            public_key=Config.BRAINTREE_PUBLIC_KEY,
            private_key=Config.BRAINTREE_PRIVATE_KEY,
            environment=Config.BRAINTREE_ENVIRONMENT,
        )

    async def generate_client_token(self) -> str:
        """Client token for the drop-in payment UI"""
        try:
            token = await asyncio.to_thread(self.client.client_token.generate)
        except BraintreeError as e:
            self.logger.error(f"Client token request failed: {e!r}")
            raise GatewayError("Error generating payment token", error=self._describe(e))

        if not token:
            raise GatewayError("Error generating payment token",
                               error="gateway returned no client token")
        return token

    async def sale(self, amount: Decimal, nonce: str) -> GatewayResult:
        """Charge a tokenized payment method and submit it for settlement.

        Declines come back as an unsuccessful GatewayResult; transport and
        credential failures raise GatewayError.
        """
        params = {
            "amount": f"{amount:.2f}",
            "payment_method_nonce": nonce,
            "options": {"submit_for_settlement": True},
        }
        self.logger.info(f"Submitting sale of {amount:.2f} to merchant {self.merchant_id}")

        try:
            result = await asyncio.to_thread(self.client.transaction.sale, params)
        except BraintreeError as e:
            self.logger.error(f"Sale request failed: {e!r}")
            raise GatewayError(error=self._describe(e))

        transaction = self._transaction_record(getattr(result, "transaction", None))

        if not result.is_success:
            return GatewayResult(success=False, transaction=transaction,
                                 message=result.message or "Transaction was not approved")

        if transaction is None:
            return GatewayResult(success=False, message="Gateway returned no transaction")

        if transaction.get("status") not in CAPTURED_STATUSES:
            return GatewayResult(
                success=False,
                transaction=transaction,
                message=f"Transaction {transaction.get('status') or 'without status'} was not approved"
            )

        return GatewayResult(success=True, transaction=transaction)

    @staticmethod
    def _transaction_record(transaction) -> Optional[Dict[str, Any]]:
        """JSON-ready summary of an SDK transaction"""
        if transaction is None:
            return None

        created_at = getattr(transaction, "created_at", None)
        amount = getattr(transaction, "amount", None)
        record = {
            "id": getattr(transaction, "id", None),
            "status": getattr(transaction, "status", None),
            "type": getattr(transaction, "type", None),
            "amount": str(amount) if amount is not None else None,
            "currency_iso_code": getattr(transaction, "currency_iso_code", None),
            "processor_response_code": getattr(transaction, "processor_response_code", None),
            "processor_response_text": getattr(transaction, "processor_response_text", None),
            "created_at": created_at.isoformat() if created_at is not None else None,
        }
        return {key: value for key, value in record.items() if value is not None}

    @staticmethod
    def _describe(error: BraintreeError) -> str:
        return str(error) or type(error).__name__
