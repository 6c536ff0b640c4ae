# storefront/services/base_service.py
import logging
import asyncpg
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional
from ..constants import INTEGER_MAX
from ..exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError

class BaseService:
    """Shared plumbing for services that talk to the database"""

    def __init__(self, db):
        self.db = db
        self.logger = logging.getLogger(self.__class__.__module__)

    @asynccontextmanager
    async def connection(self, conflict_message: Optional[str] = None) -> AsyncIterator[Any]:
        """Acquire a pooled connection, translating driver errors.

        Unique violations become ConflictError; any other database failure
        becomes PersistenceError.
        """
        try:
            async with self.db.pool.acquire() as conn:
                yield conn
        except asyncpg.UniqueViolationError as e:
            raise ConflictError(conflict_message, error=str(e))
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            self.logger.error(f"Database error: {e}", exc_info=True)
            raise PersistenceError(error=str(e))

    @staticmethod
    def parse_id(value: Any, not_found_message: str) -> int:
        """Ids that cannot be parsed cannot resolve to a record"""
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            raise NotFoundError(not_found_message, error=f"invalid id {value!r}")
        if not 0 < number <= INTEGER_MAX:
            raise NotFoundError(not_found_message, error=f"invalid id {value!r}")
        return number

    @staticmethod
    def require_id(value: Any, message: str) -> int:
        """Ids the caller must supply; missing or malformed ones are client errors"""
        if value is None or not str(value).strip():
            raise ValidationError(message)
        try:
            number = int(str(value).strip())
        except ValueError:
            raise ValidationError(message, error=f"invalid id {value!r}")
        if not 0 < number <= INTEGER_MAX:
            raise ValidationError(message, error=f"invalid id {value!r}")
        return number
