"""API key entity."""

from dataclasses import dataclass
from datetime import UTC, datetime

from nvc_exercises.domain.common.entity import Entity
from nvc_exercises.domain.common.exceptions import ValidationError
from nvc_exercises.domain.common.value_objects import ApiKeyId
from nvc_exercises.domain.identity.value_objects import ApiKeyDigest, ApiKeyStatus

MAX_LABEL_LENGTH = 255


@dataclass(eq=False)
class ApiKey(Entity[ApiKeyId]):
    """
    Server-side record of an issued API key.

    Business Rules:
    - Label must be non-empty (max MAX_LABEL_LENGTH chars)
    - Only the digest of the secret is held
    - Status only moves from ACTIVE to REVOKED; keys are never deleted
    - last_used_at changes only on a successful validation
    """

    id: ApiKeyId
    key_digest: ApiKeyDigest
    label: str
    status: ApiKeyStatus
    issued_at: datetime
    last_used_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.label or not self.label.strip():
            raise ValidationError("API key label cannot be empty", field="label", value=self.label)
        if len(self.label) > MAX_LABEL_LENGTH:
            raise ValidationError(
                f"API key label cannot exceed {MAX_LABEL_LENGTH} characters", field="label"
            )

    @property
    def is_active(self) -> bool:
        return self.status is ApiKeyStatus.ACTIVE

    def mark_used(self, at: datetime | None = None) -> None:
        """Record a successful validation."""
        self.last_used_at = at or datetime.now(UTC)

    @classmethod
    def issue(cls, key_digest: ApiKeyDigest, label: str) -> "ApiKey":
        """
        Create a new active key record (ID will be 0 until persisted).

        Raises:
            ValidationError: If label is empty
        """
        return cls(
            id=ApiKeyId.generate(),
            key_digest=key_digest,
            label=label.strip() if label else label,
            status=ApiKeyStatus.ACTIVE,
            issued_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: ApiKeyId,
        key_digest: ApiKeyDigest,
        label: str,
        status: ApiKeyStatus,
        issued_at: datetime,
        last_used_at: datetime | None,
    ) -> "ApiKey":
        """Reconstitute an API key from persistence."""
        return cls(
            id=id,
            key_digest=key_digest,
            label=label,
            status=status,
            issued_at=issued_at,
            last_used_at=last_used_at,
        )
