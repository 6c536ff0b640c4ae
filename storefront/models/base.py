# storefront/models/base.py
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict

class TimeStampedModel(BaseModel):
    """Base model for stored records with timestamp fields"""
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_record(cls, record) -> "TimeStampedModel":
        """Build a model from an asyncpg record (or any mapping)"""
        return cls.model_validate(dict(record))

    def to_response(self) -> Dict[str, Any]:
        """JSON-safe representation for response bodies"""
        return self.model_dump(mode="json")
