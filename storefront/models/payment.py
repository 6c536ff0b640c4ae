# storefront/models/payment.py
from typing import Any, Dict, Optional
from pydantic import BaseModel

class GatewayResult(BaseModel):
    """Outcome of a gateway sale.

    ``raw`` is what gets stored on the order as its payment record.
    """
    success: bool
    transaction: Optional[Dict[str, Any]] = None
    message: Optional[str] = None

    @property
    def raw(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
