"""Protocol for ApiKey repository in identity context."""

from datetime import datetime
from typing import Protocol

from nvc_exercises.domain.common.value_objects import ApiKeyId
from nvc_exercises.domain.identity.entities import ApiKey
from nvc_exercises.domain.identity.value_objects import ApiKeyDigest


class ApiKeyRepositoryProtocol(Protocol):
    """Protocol for ApiKey repository operations."""

    def find_active_by_digest(self, key_digest: ApiKeyDigest) -> ApiKey | None:
        """
        Find a key whose digest matches and whose status is active.

        Both conditions must be checked in one lookup so that a concurrent
        revocation is never observed as still active.

        Args:
            key_digest: Digest of the presented key

        Returns:
            ApiKey entity if an active key matches, None otherwise
        """
        ...

    def find_by_id(self, api_key_id: ApiKeyId) -> ApiKey | None:
        """Find a key by ID regardless of status."""
        ...

    def find_all(self) -> list[ApiKey]:
        """Get all keys, newest first."""
        ...

    def add(self, api_key: ApiKey) -> ApiKey:
        """
        Persist a newly issued key.

        Returns:
            Saved entity with database-generated ID
        """
        ...

    def touch_last_used(self, api_key_id: ApiKeyId, used_at: datetime) -> None:
        """Record a successful validation time."""
        ...

    def revoke(self, api_key_id: ApiKeyId) -> bool:
        """
        Move an active key to revoked.

        Returns:
            True if the key was active and is now revoked, False otherwise
        """
        ...
