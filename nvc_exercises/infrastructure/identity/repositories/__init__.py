from .api_key_repository import ApiKeyRepository

__all__ = ["ApiKeyRepository"]
