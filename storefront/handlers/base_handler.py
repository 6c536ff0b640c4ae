# storefront/handlers/base_handler.py
import logging
from typing import Any, Dict, Optional, Tuple
from ..exceptions import AuthRequiredError, PermissionDeniedError, StorefrontError
from ..models.user import AuthUser

Response = Tuple[int, Dict[str, Any]]

class BaseHandler:
    """Base class for handlers.

    Handlers sit between the HTTP layer and the services: they take parsed
    request fields and always answer with ``(status, body)`` where body is
    ``{"success": bool, "message": str, ...}``.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__)

    @staticmethod
    def respond(status: int, message: str, **payload) -> Response:
        return status, {"success": True, "message": message, **payload}

    def fail(self, exc: Exception, fallback_message: str) -> Response:
        """Translate an exception into an error response"""
        if isinstance(exc, StorefrontError):
            body = {"success": False, "message": exc.message, **exc.payload}
            if exc.status >= 500:
                self.logger.error(f"{fallback_message}: {exc.error or exc.message}")
                if exc.message == type(exc).default_message:
                    body["message"] = fallback_message
                body["error"] = exc.error or exc.message
            return exc.status, body

        self.logger.error(f"{fallback_message}: {exc}", exc_info=True)
        return 500, {"success": False, "message": fallback_message, "error": str(exc)}

    @staticmethod
    def require_user(user: Optional[AuthUser]) -> AuthUser:
        if user is None:
            raise AuthRequiredError()
        return user

    @staticmethod
    def require_admin(user: Optional[AuthUser]) -> AuthUser:
        """Admin check for order status changes"""
        user = BaseHandler.require_user(user)
        if not user.is_admin:
            raise PermissionDeniedError()
        return user
