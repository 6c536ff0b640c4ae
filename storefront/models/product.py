# storefront/models/product.py
from decimal import Decimal
from pathlib import Path
from typing import Optional
from pydantic import BaseModel
from .base import TimeStampedModel

class Product(TimeStampedModel):
    """Catalog product; the photo bytes are never part of this model"""
    product_id: int
    name: str
    slug: str
    description: str
    price: Decimal
    category_id: int
    quantity: int
    shipping: bool = False
    has_photo: bool = False

    # Not stored on the product row, joined in from categories
    category_name: Optional[str] = None
    category_slug: Optional[str] = None

class PhotoUpload(BaseModel):
    """A photo as handed over by the HTTP layer: in memory or in a temp file"""
    data: Optional[bytes] = None
    path: Optional[Path] = None
    size: Optional[int] = None
    content_type: Optional[str] = None

class PhotoAsset(BaseModel):
    """Validated photo bytes ready to be stored or served"""
    data: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.data)
