"""Pydantic schemas for API key output. The key digest is never part of them."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nvc_exercises.domain.identity.entities import ApiKey
from nvc_exercises.domain.identity.value_objects import ApiKeyStatus


class ApiKeySummary(BaseModel):
    """Schema for listing an issued API key."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    label: str
    status: ApiKeyStatus
    is_active: bool
    issued_at: datetime
    last_used_at: datetime | None = None

    @classmethod
    def from_entity(cls, api_key: ApiKey) -> "ApiKeySummary":
        return cls(
            id=api_key.id.value,
            label=api_key.label,
            status=api_key.status,
            is_active=api_key.is_active,
            issued_at=api_key.issued_at,
            last_used_at=api_key.last_used_at,
        )


class IssuedApiKeyResponse(BaseModel):
    """Schema for a newly issued key, shown exactly once."""

    id: int = Field(..., description="ID of the new key")
    key: str = Field(..., description="Plaintext API key; store it now, it cannot be shown again")
