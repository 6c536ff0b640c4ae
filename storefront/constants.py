# storefront/constants.py
from decimal import Decimal

# Photos must be strictly smaller than this many bytes
MAX_PHOTO_SIZE = 1_000_000

DEFAULT_PRODUCT_LIMIT = 12
PRODUCTS_PER_PAGE = 6
RELATED_PRODUCTS_LIMIT = 3

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 50
CATEGORY_DESCRIPTION_MAX_LENGTH = 500

# Role value the auth middleware assigns to administrators
ADMIN_ROLE = 1

# Column limits of the catalog schema
INTEGER_MAX = 2**31 - 1
PRICE_MAX = Decimal("9999999999.99")
PRICE_PLACES = Decimal("0.01")
PRODUCT_NAME_MAX_LENGTH = 255
SLUG_MAX_LENGTH = 255
