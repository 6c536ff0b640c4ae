"""Request handlers: the boundary the HTTP layer calls into"""
from .base_handler import BaseHandler, Response
from .product_handler import ProductHandler
from .category_handler import CategoryHandler
from .payment_handler import PaymentHandler
from .order_handler import OrderHandler

__all__ = [
    'BaseHandler',
    'Response',
    'ProductHandler',
    'CategoryHandler',
    'PaymentHandler',
    'OrderHandler',
]
