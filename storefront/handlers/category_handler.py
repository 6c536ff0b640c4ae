# storefront/handlers/category_handler.py
from typing import Any, Optional
from .base_handler import BaseHandler, Response
from ..services.category_service import CategoryService

class CategoryHandler(BaseHandler):
    """Category endpoints"""

    def __init__(self, category_service: CategoryService):
        super().__init__()
        self.category_service = category_service

    async def create_category(self, name: Optional[str],
                              description: Optional[str] = None) -> Response:
        try:
            category = await self.category_service.add_category(name, description)
        except Exception as e:
            return self.fail(e, "Error creating category")

        return self.respond(201, "Category created successfully", category=category.to_response())

    async def update_category(self, category_id: Any, name: Optional[str]) -> Response:
        try:
            category = await self.category_service.update_category(category_id, name)
        except Exception as e:
            return self.fail(e, "Error updating category")

        return self.respond(200, "Category updated successfully", category=category.to_response())

    async def get_categories(self) -> Response:
        try:
            categories = await self.category_service.get_all_categories()
        except Exception as e:
            return self.fail(e, "Error while getting all categories")

        return self.respond(200, "All Categories List",
                            category=[c.to_response() for c in categories])

    async def get_category(self, slug: str) -> Response:
        try:
            category = await self.category_service.get_category_by_slug(slug)
        except Exception as e:
            return self.fail(e, "Error retrieving category")

        return self.respond(200, "Category retrieved successfully", category=category.to_response())

    async def delete_category(self, category_id: Any) -> Response:
        try:
            await self.category_service.delete_category(category_id)
        except Exception as e:
            return self.fail(e, "Error deleting category")

        return self.respond(200, "Category deleted successfully")
