# storefront/services/product_query_service.py
from typing import Any, Dict, List, Optional, Sequence, Tuple
from .base_service import BaseService
from .product_service import PRODUCT_COLUMNS, PRODUCT_NOT_FOUND
from ..constants import DEFAULT_PRODUCT_LIMIT, PRODUCTS_PER_PAGE, RELATED_PRODUCTS_LIMIT
from ..exceptions import NotFoundError, ValidationError
from ..models.category import Category
from ..models.product import PhotoAsset, Product
from ..utils.fields import to_decimal, to_id, to_page

# Products with their category "populated"
PRODUCTS_WITH_CATEGORY = f"""
    SELECT {PRODUCT_COLUMNS},
        c.name AS category_name, c.slug AS category_slug
    FROM products p
    LEFT JOIN categories c ON c.category_id = p.category_id
"""

def build_filter_query(category_ids: Optional[Sequence[Any]],
                       price_range: Optional[Sequence[Any]]) -> Tuple[str, List[Any]]:
    """SQL and parameters for the category / price filter.

    Each predicate is only added when its input is non-empty; a price range
    that does not have exactly two bounds is ignored.
    """
    conditions = []
    params: List[Any] = []

    if category_ids:
        params.append([to_id(cid, 'category id') for cid in category_ids])
        conditions.append(f"p.category_id = ANY(${len(params)}::int[])")

    if price_range is not None and len(price_range) == 2:
        low, high = (to_decimal(bound, 'price') for bound in price_range)
        params.append(low)
        params.append(high)
        conditions.append(f"p.price BETWEEN ${len(params) - 1} AND ${len(params)}")

    query = PRODUCTS_WITH_CATEGORY
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " ORDER BY p.created_at DESC, p.product_id DESC"
    return query, params

class ProductQueryService(BaseService):
    """Read paths over the catalog"""

    async def get_products(self, limit: int = DEFAULT_PRODUCT_LIMIT) -> List[Product]:
        """Newest products first"""
        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                {PRODUCTS_WITH_CATEGORY}
                ORDER BY p.created_at DESC, p.product_id DESC
                LIMIT $1
            """, limit)
        return [Product.from_record(row) for row in rows]

    async def get_product_by_slug(self, slug: str) -> Product:
        async with self.connection() as conn:
            row = await conn.fetchrow(f"""
                {PRODUCTS_WITH_CATEGORY}
                WHERE p.slug = $1
            """, (slug or "").strip().lower())

        if row is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return Product.from_record(row)

    async def get_product_photo(self, product_id: Any) -> PhotoAsset:
        """Stored photo bytes and content type"""
        product_id = self.parse_id(product_id, "No photo data found")

        async with self.connection() as conn:
            row = await conn.fetchrow("""
                SELECT photo, photo_content_type
                FROM products
                WHERE product_id = $1
            """, product_id)

        if row is None or not row['photo']:
            raise NotFoundError("No photo data found")
        return PhotoAsset(
            data=bytes(row['photo']),
            content_type=row['photo_content_type'] or 'application/octet-stream'
        )

    async def count_products(self) -> int:
        async with self.connection() as conn:
            count = await conn.fetchval("SELECT COUNT(*) FROM products")
        return count or 0

    async def get_products_page(self, page: Any = None,
                                per_page: int = PRODUCTS_PER_PAGE) -> List[Product]:
        """One page of products, newest first; pages start at 1"""
        page = to_page(page)

        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                {PRODUCTS_WITH_CATEGORY}
                ORDER BY p.created_at DESC, p.product_id DESC
                OFFSET $1
                LIMIT $2
            """, (page - 1) * per_page, per_page)
        return [Product.from_record(row) for row in rows]

    async def search_products(self, keyword: Optional[str]) -> List[Product]:
        """Case-insensitive substring match on name or description"""
        if keyword is None or not str(keyword).strip():
            raise ValidationError("Please provide a keyword")

        keyword = str(keyword).strip()
        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                {PRODUCTS_WITH_CATEGORY}
                WHERE strpos(lower(p.name), lower($1)) > 0
                   OR strpos(lower(p.description), lower($1)) > 0
                ORDER BY p.created_at DESC, p.product_id DESC
            """, keyword)
        return [Product.from_record(row) for row in rows]

    async def get_related_products(self, product_id: Any, category_id: Any,
                                   limit: int = RELATED_PRODUCTS_LIMIT) -> List[Product]:
        """Other products from the same category"""
        product_id = self.require_id(product_id, "Product id is required")
        category_id = self.require_id(category_id, "Category id is required")

        async with self.connection() as conn:
            rows = await conn.fetch(f"""
                {PRODUCTS_WITH_CATEGORY}
                WHERE p.category_id = $1 AND p.product_id <> $2
                ORDER BY p.created_at DESC, p.product_id DESC
                LIMIT $3
            """, category_id, product_id, limit)
        return [Product.from_record(row) for row in rows]

    async def get_category_products(self, slug: Optional[str]) -> Dict[str, Any]:
        """A category and all of its products"""
        slug = (slug or "").strip().lower()
        if not slug:
            raise ValidationError("Category slug is required")

        async with self.connection() as conn:
            category = await conn.fetchrow("""
                SELECT category_id, name, slug, description, is_active,
                       created_at, updated_at
                FROM categories
                WHERE slug = $1
            """, slug)

            if category is None:
                raise ValidationError("Category not found")

            rows = await conn.fetch(f"""
                {PRODUCTS_WITH_CATEGORY}
                WHERE p.category_id = $1
                ORDER BY p.created_at DESC, p.product_id DESC
            """, category['category_id'])

        return {
            'category': Category.from_record(category),
            'products': [Product.from_record(row) for row in rows],
        }

    async def filter_products(self, category_ids: Optional[Sequence[Any]] = None,
                              price_range: Optional[Sequence[Any]] = None) -> List[Product]:
        query, params = build_filter_query(category_ids, price_range)

        async with self.connection() as conn:
            rows = await conn.fetch(query, *params)
        return [Product.from_record(row) for row in rows]
