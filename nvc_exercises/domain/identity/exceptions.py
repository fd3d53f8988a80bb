"""Identity domain exceptions."""

from nvc_exercises.domain.common.exceptions import DomainError, EntityNotFoundError


class ApiKeyNotFoundError(EntityNotFoundError):
    """Raised when an API key id does not exist."""

    def __init__(self, api_key_id: int) -> None:
        super().__init__("API key", api_key_id)


class InvalidApiKeyError(DomainError):
    """
    Raised when a presented key does not authenticate.

    Covers both unknown and revoked keys; callers cannot tell them apart.
    """

    def __init__(self) -> None:
        super().__init__("Invalid or missing API key")
