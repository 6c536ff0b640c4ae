# storefront/models/user.py
from pydantic import BaseModel
from ..constants import ADMIN_ROLE

class AuthUser(BaseModel):
    """Caller identity attached to a request by the auth middleware"""
    id: int
    role: int = 0

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
