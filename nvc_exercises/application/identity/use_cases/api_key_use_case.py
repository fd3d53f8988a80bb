"""Use case for the API key lifecycle: issue, validate, revoke, list."""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from nvc_exercises.application.identity.protocols import ApiKeyRepositoryProtocol
from nvc_exercises.domain.common.exceptions import ValidationError
from nvc_exercises.domain.common.value_objects import ApiKeyId
from nvc_exercises.domain.identity.entities import ApiKey
from nvc_exercises.domain.identity.exceptions import ApiKeyNotFoundError, InvalidApiKeyError
from nvc_exercises.domain.identity.value_objects import ApiKeyDigest, ApiKeySecret
from nvc_exercises.domain.identity.value_objects.api_key_secret import DEFAULT_PREFIX

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class IssuedApiKey:
    """Result of issuance. The only place the plaintext key ever appears."""

    key: str
    id: int


class ApiKeyUseCase:
    """Use case for API key issuance, validation and revocation."""

    def __init__(
        self, api_key_repository: ApiKeyRepositoryProtocol, key_prefix: str = DEFAULT_PREFIX
    ) -> None:
        """Initialize use case with repository protocol."""
        self.api_key_repository = api_key_repository
        self.key_prefix = key_prefix

    def issue(self, label: str) -> IssuedApiKey:
        """
        Issue a new API key.

        Args:
            label: Human-readable name for the holder's bookkeeping

        Returns:
            The plaintext key and its ID; the key cannot be retrieved again

        Raises:
            ValidationError: If label is empty
        """
        if not label or not label.strip():
            raise ValidationError("API key label is required", field="label", value=label)

        secret = ApiKeySecret.generate(self.key_prefix)
        api_key = self.api_key_repository.add(ApiKey.issue(secret.digest(), label))

        logger.info("api_key_issued", api_key_id=api_key.id.value, label=api_key.label)

        return IssuedApiKey(key=secret.value, id=api_key.id.value)

    def validate(self, presented_key: str) -> ApiKey:
        """
        Authenticate a presented key.

        Args:
            presented_key: Plaintext key as sent by the caller

        Returns:
            The active key record, with last_used_at set to now

        Raises:
            InvalidApiKeyError: If no active key matches
        """
        if not presented_key:
            raise InvalidApiKeyError

        api_key = self.api_key_repository.find_active_by_digest(ApiKeyDigest.of(presented_key))
        if api_key is None:
            logger.info("api_key_validation_failed")
            raise InvalidApiKeyError

        used_at = datetime.now(UTC)
        self.api_key_repository.touch_last_used(api_key.id, used_at)
        api_key.mark_used(used_at)

        return api_key

    def revoke(self, api_key_id: int) -> bool:
        """
        Revoke a key. Revocation is permanent.

        Args:
            api_key_id: ID of the key

        Returns:
            True if the key was active, False if it was already revoked or unknown
        """
        revoked = self.api_key_repository.revoke(ApiKeyId(api_key_id))
        if revoked:
            logger.info("api_key_revoked", api_key_id=api_key_id)
        return revoked

    def get(self, api_key_id: int) -> ApiKey:
        """
        Get a key by ID.

        Raises:
            ApiKeyNotFoundError: If the key does not exist
        """
        api_key = self.api_key_repository.find_by_id(ApiKeyId(api_key_id))
        if api_key is None:
            raise ApiKeyNotFoundError(api_key_id)
        return api_key

    def list_keys(self) -> list[ApiKey]:
        """List all keys, newest first."""
        return self.api_key_repository.find_all()
