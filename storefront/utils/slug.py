# storefront/utils/slug.py
from slugify import slugify

def derive_slug(name: str) -> str:
    """URL-safe lowercase slug for a display name.

    Deterministic, and a fixed point when applied to its own output.
    """
    return slugify((name or "").strip(), lowercase=True)
