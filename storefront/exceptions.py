# storefront/exceptions.py
from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """Base error for the storefront core.

    ``message`` is the stable, human readable text returned to callers.
    ``error`` keeps the underlying detail for diagnostics.
    """
    status = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None,
                 payload: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.error = error
        self.payload = payload or {}
        super().__init__(self.message)


class ValidationError(StorefrontError):
    status = 400
    default_message = "Invalid request"


class AssetTooLargeError(ValidationError):
    default_message = "Photo should be less than 1MB"


class ConflictError(StorefrontError):
    status = 409
    default_message = "Resource already exists"


class NotFoundError(StorefrontError):
    status = 404
    default_message = "Resource not found"


class AuthRequiredError(StorefrontError):
    status = 401
    default_message = "User authentication required"


class PermissionDeniedError(StorefrontError):
    status = 403
    default_message = "Admin access required"


class GatewayError(StorefrontError):
    default_message = "Payment gateway error"


class PersistenceError(StorefrontError):
    default_message = "Database error"
