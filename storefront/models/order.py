# storefront/models/order.py
from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from enum import Enum
from typing import Any, Dict, List
from .base import TimeStampedModel

class OrderStatus(str, Enum):
    NOT_PROCESSED = "Not Process"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    # Stored spelling, existing orders carry it
    DELIVERED = "deliverd"
    CANCELLED = "cancel"

class CartItem(BaseModel):
    """A cart line as sent by the client; extra product fields are kept"""
    price: Decimal

    model_config = ConfigDict(extra="allow")

class Order(TimeStampedModel):
    """Order recorded after a successful payment"""
    order_id: int
    buyer_id: int
    products: List[Dict[str, Any]]
    payment: Dict[str, Any]
    status: OrderStatus = OrderStatus.NOT_PROCESSED

