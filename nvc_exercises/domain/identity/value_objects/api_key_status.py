"""API key status."""

from enum import StrEnum


class ApiKeyStatus(StrEnum):
    """
    Lifecycle state of an issued key.

    ACTIVE -> REVOKED is the only transition; REVOKED is terminal.
    """

    ACTIVE = "active"
    REVOKED = "revoked"

    def can_transition_to(self, target: "ApiKeyStatus") -> bool:
        return self is ApiKeyStatus.ACTIVE and target is ApiKeyStatus.REVOKED
