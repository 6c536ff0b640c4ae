# storefront/services/category_service.py
from typing import Any, List, Optional
from .base_service import BaseService
from ..constants import (
    CATEGORY_DESCRIPTION_MAX_LENGTH,
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_NAME_MIN_LENGTH,
    SLUG_MAX_LENGTH,
)
from ..exceptions import ConflictError, NotFoundError, ValidationError
from ..models.category import Category
from ..utils.slug import derive_slug

CATEGORY_COLUMNS = """
    category_id, name, slug, description, is_active, created_at, updated_at
"""

CATEGORY_CONFLICT = "Category already exists"
CATEGORY_NOT_FOUND = "Category not found"

class CategoryService(BaseService):
    """Category management"""

    async def add_category(self, name: Optional[str],
                           description: Optional[str] = None) -> Category:
        """Create a category; names are unique regardless of case"""
        name = self._clean_name(name, "Category name is required and cannot be empty")
        description = self._clean_description(description)
        slug = self._slug_for(name)

        async with self.connection(CATEGORY_CONFLICT) as conn:
            if await self._name_taken(conn, name):
                raise ConflictError(CATEGORY_CONFLICT)

            row = await conn.fetchrow(f"""
                INSERT INTO categories (name, slug, description)
                VALUES ($1, $2, $3)
                RETURNING {CATEGORY_COLUMNS}
            """, name, slug, description)

        category = Category.from_record(row)
        self.logger.info(f"Category {category.category_id} created ({category.slug})")
        return category

    async def get_category_by_slug(self, slug: str) -> Category:
        async with self.connection() as conn:
            row = await conn.fetchrow(f"""
                SELECT {CATEGORY_COLUMNS}
                FROM categories
                WHERE slug = $1
            """, (slug or "").strip().lower())

        if row is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return Category.from_record(row)

    async def get_all_categories(self) -> List[Category]:
        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                SELECT {CATEGORY_COLUMNS}
                FROM categories
                ORDER BY name
            """)
        return [Category.from_record(row) for row in rows]

    async def update_category(self, category_id: Any, name: Optional[str]) -> Category:
        """Rename a category, recomputing its slug"""
        name = self._clean_name(name, "Category name is required")
        slug = self._slug_for(name)
        category_id = self.parse_id(category_id, CATEGORY_NOT_FOUND)

        async with self.connection(CATEGORY_CONFLICT) as conn:
            exists = await conn.fetchval("""
                SELECT 1 FROM categories WHERE category_id = $1
            """, category_id)
            if not exists:
                raise NotFoundError(CATEGORY_NOT_FOUND)

            if await self._name_taken(conn, name, exclude_id=category_id):
                raise ConflictError(CATEGORY_CONFLICT)

            row = await conn.fetchrow(f"""
                UPDATE categories
                SET name = $1, slug = $2, updated_at = CURRENT_TIMESTAMP
                WHERE category_id = $3
                RETURNING {CATEGORY_COLUMNS}
            """, name, slug, category_id)

        if row is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)

        category = Category.from_record(row)
        self.logger.info(f"Category {category.category_id} renamed to {category.name!r}")
        return category

    async def delete_category(self, category_id: Any) -> None:
        """Delete a category; its products keep their (now dangling) category id"""
        category_id = self.parse_id(category_id, CATEGORY_NOT_FOUND)

        async with self.connection() as conn:
            deleted = await conn.fetchval("""
                DELETE FROM categories
                WHERE category_id = $1
                RETURNING category_id
            """, category_id)

        if deleted is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)

        self.logger.info(f"Category {category_id} deleted")

    @staticmethod
    async def _name_taken(conn, name: str, exclude_id: Optional[int] = None) -> bool:
        taken = await conn.fetchval("""
            SELECT EXISTS (
                SELECT 1 FROM categories
                WHERE lower(name) = lower($1)
                AND ($2::int IS NULL OR category_id <> $2::int)
            )
        """, name, exclude_id)
        return bool(taken)

    @staticmethod
    def _clean_name(name: Optional[str], missing_message: str) -> str:
        if name is None or not str(name).strip():
            raise ValidationError(missing_message)

        name = str(name).strip()
        if not CATEGORY_NAME_MIN_LENGTH <= len(name) <= CATEGORY_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Category name must be between {CATEGORY_NAME_MIN_LENGTH} "
                f"and {CATEGORY_NAME_MAX_LENGTH} characters"
            )
        return name

    @staticmethod
    def _clean_description(description: Optional[str]) -> Optional[str]:
        if description is None:
            return None
        description = str(description).strip()
        if len(description) > CATEGORY_DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description cannot exceed {CATEGORY_DESCRIPTION_MAX_LENGTH} characters"
            )
        return description or None

    @staticmethod
    def _slug_for(name: str) -> str:
        slug = derive_slug(name)
        if not slug:
            raise ValidationError("Category name must contain letters or digits")
        if len(slug) > SLUG_MAX_LENGTH:
            raise ValidationError("Category name is too long to build a slug from")
        return slug
