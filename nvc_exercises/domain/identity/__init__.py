"""
Identity bounded context - Domain layer.

Handles the API keys that gate access to exercise content.
"""

from .entities import ApiKey
from .exceptions import ApiKeyNotFoundError, InvalidApiKeyError

__all__ = ["ApiKey", "ApiKeyNotFoundError", "InvalidApiKeyError"]
