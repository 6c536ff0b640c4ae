# storefront/utils/fields.py
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional, Tuple
from ..constants import INTEGER_MAX, PRICE_MAX, PRICE_PLACES
from ..exceptions import ValidationError

# (field, message) pairs, checked in order; the first missing one is reported
Guard = Tuple[str, str]

def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False

def first_missing(fields: Dict[str, Any], guards: Iterable[Guard]) -> Optional[str]:
    """Message of the first guarded field that is missing, else None"""
    for field, message in guards:
        if is_missing(fields.get(field)):
            return message
    return None

def require(fields: Dict[str, Any], guards: Iterable[Guard]):
    message = first_missing(fields, guards)
    if message:
        raise ValidationError(message)

def to_decimal(value: Any, field: str = "price") -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Product {field} must be a number")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Product {field} must be a number")
    if not number.is_finite():
        raise ValidationError(f"Product {field} must be a number")
    if number < 0:
        raise ValidationError(f"Product {field} cannot be negative")
    return number

def to_price(value: Any, field: str = "price") -> Decimal:
    """A stored price: whole cents, within the column's range"""
    number = to_decimal(value, field)
    if number > PRICE_MAX:
        raise ValidationError(f"Product {field} cannot exceed {PRICE_MAX}")
    cents = number.quantize(PRICE_PLACES)
    if cents != number:
        raise ValidationError(f"Product {field} cannot have more than 2 decimal places")
    return cents

def to_int(value: Any, field: str = "quantity") -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Product {field} must be a whole number")
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise ValidationError(f"Product {field} must be a whole number")
    if number < 0:
        raise ValidationError(f"Product {field} cannot be negative")
    if number > INTEGER_MAX:
        raise ValidationError(f"Product {field} cannot exceed {INTEGER_MAX}")
    return number

def to_id(value: Any, label: str = "id") -> int:
    """Parse a record identifier; ids are positive integers"""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid {label}")
    if not 0 < number <= INTEGER_MAX:
        raise ValidationError(f"Invalid {label}")
    return number

def to_bool(value: Any) -> bool:
    """Coerce form values: booleans pass through, "true"/"false" (also 1/0)"""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "1"):
        return True
    if text in ("false", "0", ""):
        return False
    raise ValidationError("Product shipping must be true or false")

def to_page(value: Any, default: int = 1) -> int:
    """Page numbers default to 1 when absent, unparsable or non-positive"""
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if page <= 0:
        return default
    # past the last page of any catalog; keeps the offset in range
    return min(page, INTEGER_MAX)
