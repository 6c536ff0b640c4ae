# storefront/models/category.py
from typing import Optional
from .base import TimeStampedModel

class Category(TimeStampedModel):
    """Category model for product categorization"""
    category_id: int
    name: str
    slug: str
    description: Optional[str] = None
    is_active: bool = True
