# storefront/services/product_service.py
from typing import Any, Dict, Optional
from .base_service import BaseService
from ..constants import PRODUCT_NAME_MAX_LENGTH, SLUG_MAX_LENGTH
from ..exceptions import NotFoundError, ValidationError
from ..models.product import PhotoUpload, Product
from ..utils.assets import read_upload
from ..utils.fields import require, to_bool, to_id, to_int, to_price
from ..utils.slug import derive_slug

# Everything but the photo bytes
PRODUCT_COLUMNS = """
    p.product_id, p.name, p.slug, p.description, p.price, p.category_id,
    p.quantity, p.shipping, p.photo IS NOT NULL AS has_photo,
    p.created_at, p.updated_at
"""

CREATE_GUARDS = [
    ("name", "Product name is required"),
    ("description", "Product description is required"),
    ("price", "Product price is required"),
    ("category", "Product category is required"),
    ("quantity", "Product quantity is required"),
]

UPDATE_GUARDS = CREATE_GUARDS + [
    ("shipping", "Product shipping is required"),
]

PRODUCT_CONFLICT = "A product with this name already exists"
PRODUCT_NOT_FOUND = "Product not found"

class ProductService(BaseService):
    """Product writes: create, update and delete"""

    async def add_product(self, fields: Dict[str, Any],
                          photo: Optional[PhotoUpload] = None) -> Product:
        """Validate and store a new product"""
        require(fields, CREATE_GUARDS)
        asset = await read_upload(photo)
        data = self._coerce(fields)

        async with self.connection(PRODUCT_CONFLICT) as conn:
            row = await conn.fetchrow(f"""
                INSERT INTO products AS p (
                    name, slug, description, price, category_id,
                    quantity, shipping, photo, photo_content_type
                ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
                RETURNING {PRODUCT_COLUMNS}
            """,
                data['name'],
                data['slug'],
                data['description'],
                data['price'],
                data['category_id'],
                data['quantity'],
                data['shipping'],
                asset.data if asset else None,
                asset.content_type if asset else None
            )

        product = Product.from_record(row)
        self.logger.info(f"Product {product.product_id} created ({product.slug})")
        return product

    async def update_product(self, product_id: Any, fields: Dict[str, Any],
                             photo: Optional[PhotoUpload] = None) -> Product:
        """Replace a product's fields; the stored photo is kept unless a new one is sent"""
        require(fields, UPDATE_GUARDS)
        asset = await read_upload(photo)
        data = self._coerce(fields)
        product_id = self.parse_id(product_id, PRODUCT_NOT_FOUND)

        async with self.connection(PRODUCT_CONFLICT) as conn:
            row = await conn.fetchrow(f"""
                UPDATE products AS p
                SET name = $1, slug = $2, description = $3, price = $4,
                    category_id = $5, quantity = $6, shipping = $7,
                    photo = COALESCE($8, p.photo),
                    photo_content_type = COALESCE($9, p.photo_content_type),
                    updated_at = CURRENT_TIMESTAMP
                WHERE p.product_id = $10
                RETURNING {PRODUCT_COLUMNS}
            """,
                data['name'],
                data['slug'],
                data['description'],
                data['price'],
                data['category_id'],
                data['quantity'],
                data['shipping'],
                asset.data if asset else None,
                asset.content_type if asset else None,
                product_id
            )

        if row is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        product = Product.from_record(row)
        self.logger.info(f"Product {product.product_id} updated ({product.slug})")
        return product

    async def delete_product(self, product_id: Any) -> None:
        """Delete exactly one product; orders referencing it are left alone"""
        product_id = self.parse_id(product_id, PRODUCT_NOT_FOUND)

        async with self.connection() as conn:
            deleted = await conn.fetchval("""
                DELETE FROM products
                WHERE product_id = $1
                RETURNING product_id
            """, product_id)

        if deleted is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        self.logger.info(f"Product {product_id} deleted")

    @staticmethod
    def _coerce(fields: Dict[str, Any]) -> Dict[str, Any]:
        name = str(fields['name']).strip()
        if len(name) > PRODUCT_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Product name cannot exceed {PRODUCT_NAME_MAX_LENGTH} characters"
            )

        slug = derive_slug(name)
        if not slug:
            raise ValidationError("Product name must contain letters or digits")
        if len(slug) > SLUG_MAX_LENGTH:
            raise ValidationError("Product name is too long to build a slug from")

        shipping = fields.get('shipping')
        return {
            'name': name,
            'slug': slug,
            'description': str(fields['description']).strip(),
            'price': to_price(fields['price'], 'price'),
            'category_id': to_id(fields['category'], 'category id'),
            'quantity': to_int(fields['quantity'], 'quantity'),
            'shipping': to_bool(shipping) if shipping is not None else False,
        }
