from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from lads.config.constants import WaitlistStatus

class WaitlistEntry(BaseModel):
    email: str  # Stored lower-cased
    created_at: datetime = Field(default_factory=datetime.utcnow, alias="createdAt")
    status: WaitlistStatus = Field(default=WaitlistStatus.PENDING, validate_default=True)

    class Config:
        populate_by_name = True
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "email": "user@example.com",
                "createdAt": "2025-01-01T00:00:00",
                "status": "pending"
            }
        }

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class WaitlistJoinRequest(BaseModel):
    email: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "email": "user@example.com"
            }
        }

    def normalized_email(self) -> Optional[str]:
        """Return the lower-cased email, or None if it fails the minimal '@' check."""
        if not self.email or "@" not in self.email:
            return None
        return self.email.lower()
