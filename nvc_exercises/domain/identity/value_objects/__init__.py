"""Value objects of the identity context."""

from .api_key_secret import API_KEY_LENGTH, ApiKeyDigest, ApiKeySecret
from .api_key_status import ApiKeyStatus

__all__ = ["API_KEY_LENGTH", "ApiKeyDigest", "ApiKeySecret", "ApiKeyStatus"]
