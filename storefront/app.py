# storefront/app.py
import logging
from typing import Optional
from .database.database import Database
from .handlers import CategoryHandler, OrderHandler, PaymentHandler, ProductHandler
from .services.category_service import CategoryService
from .services.checkout_service import CheckoutService
from .services.order_service import OrderService
from .services.payment_service import BraintreeGateway
from .services.product_query_service import ProductQueryService
from .services.product_service import ProductService

class StorefrontApp:
    def __init__(self, db: Optional[Database] = None, gateway: Optional[BraintreeGateway] = None):
        """Build services and handlers once for the whole process"""
        self.logger = logging.getLogger(__name__)
        self.db = db or Database()
        self.gateway = gateway or BraintreeGateway.from_config()
        self.setup_services()
        self.setup_handlers()

    def setup_services(self):
        self.product_service = ProductService(self.db)
        self.product_query_service = ProductQueryService(self.db)
        self.category_service = CategoryService(self.db)
        self.order_service = OrderService(self.db)
        self.checkout_service = CheckoutService(self.gateway, self.order_service)

    def setup_handlers(self):
        self.products = ProductHandler(self.product_service, self.product_query_service)
        self.categories = CategoryHandler(self.category_service)
        self.payments = PaymentHandler(self.checkout_service)
        self.orders = OrderHandler(self.order_service)

    async def start(self):
        """Connect to the database and apply migrations"""
        await self.db.connect()
        self.logger.info("Storefront core started")

    async def stop(self):
        await self.db.close()
        self.logger.info("Storefront core stopped")
