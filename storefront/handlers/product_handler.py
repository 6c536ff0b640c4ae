# storefront/handlers/product_handler.py
from typing import Any, Dict, Optional, Sequence
from .base_handler import BaseHandler, Response
from ..services.product_query_service import ProductQueryService
from ..services.product_service import ProductService
from ..models.product import PhotoUpload

class ProductHandler(BaseHandler):
    """Product endpoints: writes go to ProductService, reads to ProductQueryService"""

    def __init__(self, product_service: ProductService, query_service: ProductQueryService):
        super().__init__()
        self.product_service = product_service
        self.query_service = query_service

    async def create_product(self, fields: Dict[str, Any],
                             photo: Optional[PhotoUpload] = None) -> Response:
        try:
            product = await self.product_service.add_product(fields, photo)
        except Exception as e:
            return self.fail(e, "Error creating product")

        return self.respond(201, "Product created successfully", product=product.to_response())

    async def update_product(self, product_id: Any, fields: Dict[str, Any],
                             photo: Optional[PhotoUpload] = None) -> Response:
        try:
            product = await self.product_service.update_product(product_id, fields, photo)
        except Exception as e:
            return self.fail(e, "Error updating product")

        return self.respond(200, "Product updated successfully", product=product.to_response())

    async def delete_product(self, product_id: Any) -> Response:
        try:
            await self.product_service.delete_product(product_id)
        except Exception as e:
            return self.fail(e, "Error deleting product")

        return self.respond(200, "Product deleted successfully")

    async def get_products(self) -> Response:
        try:
            products = await self.query_service.get_products()
        except Exception as e:
            return self.fail(e, "Error in getting products")

        return self.respond(
            200, "All Products",
            countTotal=len(products),
            products=[p.to_response() for p in products]
        )

    async def get_product(self, slug: str) -> Response:
        try:
            product = await self.query_service.get_product_by_slug(slug)
        except Exception as e:
            return self.fail(e, "Error while getting single product")

        return self.respond(200, "Product retrieved successfully", product=product.to_response())

    async def get_product_photo(self, product_id: Any) -> Response:
        """Raw photo bytes; the HTTP layer sends them with ``contentType``"""
        try:
            photo = await self.query_service.get_product_photo(product_id)
        except Exception as e:
            return self.fail(e, "Error while getting photo")

        return self.respond(
            200, "Photo retrieved successfully",
            photo=photo.data,
            contentType=photo.content_type
        )

    async def count_products(self) -> Response:
        try:
            total = await self.query_service.count_products()
        except Exception as e:
            return self.fail(e, "Error in product count")

        return self.respond(200, "Product count retrieved successfully", total=total)

    async def get_products_page(self, page: Any = None) -> Response:
        try:
            products = await self.query_service.get_products_page(page)
        except Exception as e:
            return self.fail(e, "Error in per page controller")

        return self.respond(
            200, "Products retrieved successfully",
            products=[p.to_response() for p in products]
        )

    async def search_products(self, keyword: Optional[str]) -> Response:
        try:
            results = await self.query_service.search_products(keyword)
        except Exception as e:
            return self.fail(e, "Error in search product")

        return self.respond(
            200, "Search completed successfully",
            results=[p.to_response() for p in results]
        )

    async def get_related_products(self, product_id: Any, category_id: Any) -> Response:
        try:
            products = await self.query_service.get_related_products(product_id, category_id)
        except Exception as e:
            return self.fail(e, "Error retrieving related products")

        return self.respond(
            200, "Related products retrieved",
            products=[p.to_response() for p in products]
        )

    async def get_category_products(self, slug: Optional[str]) -> Response:
        try:
            result = await self.query_service.get_category_products(slug)
        except Exception as e:
            return self.fail(e, "Error retrieving products")

        return self.respond(
            200, "Products by category retrieved",
            category=result['category'].to_response(),
            products=[p.to_response() for p in result['products']]
        )

    async def filter_products(self, checked: Optional[Sequence[Any]] = None,
                              radio: Optional[Sequence[Any]] = None) -> Response:
        """``checked`` holds category ids, ``radio`` a [min, max] price range"""
        try:
            products = await self.query_service.filter_products(checked, radio)
        except Exception as e:
            return self.fail(e, "Error while filtering products")

        return self.respond(
            200, "Products filtered successfully",
            products=[p.to_response() for p in products]
        )
