"""
API key secrets and their digests.

A secret is a recognizable prefix followed by random alphanumerics. Only the
SHA-256 digest is ever stored; the secrets are random enough that no salt or
slow hash is needed.
"""

import hashlib
import secrets
import string
from dataclasses import dataclass
from typing import Self

from nvc_exercises.domain.common.exceptions import ValidationError

API_KEY_LENGTH = 36
DEFAULT_PREFIX = "nvc_"
_ALPHABET = string.ascii_letters + string.digits
_DIGEST_LENGTH = 64


@dataclass(frozen=True)
class ApiKeyDigest:
    """SHA-256 hex digest of a plaintext API key."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != _DIGEST_LENGTH:
            raise ValueError("ApiKeyDigest must be 64 character hex string (SHA-256)")
        try:
            int(self.value, 16)
        except ValueError as err:
            raise ValueError("ApiKeyDigest must be valid hexadecimal string") from err

    @classmethod
    def of(cls, plaintext: str) -> Self:
        """Digest a presented or freshly generated plaintext."""
        return cls(hashlib.sha256(plaintext.encode("utf-8")).hexdigest())


@dataclass(frozen=True, repr=False)
class ApiKeySecret:
    """Plaintext API key. Handed to the caller once and never persisted."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("API key cannot be empty", field="api_key")

    def __repr__(self) -> str:
        return f"ApiKeySecret({self.value[:len(DEFAULT_PREFIX)]}...)"

    def digest(self) -> ApiKeyDigest:
        return ApiKeyDigest.of(self.value)

    @classmethod
    def generate(cls, prefix: str = DEFAULT_PREFIX) -> Self:
        """
        Generate a fresh secret of API_KEY_LENGTH characters, prefix included.

        Raises:
            ValueError: If the prefix leaves no room for random characters
        """
        random_length = API_KEY_LENGTH - len(prefix)
        if random_length <= 0:
            raise ValueError(f"Prefix must be shorter than {API_KEY_LENGTH} characters")
        body = "".join(secrets.choice(_ALPHABET) for _ in range(random_length))
        return cls(prefix + body)
