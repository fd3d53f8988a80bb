from .api_key_repository import ApiKeyRepositoryProtocol

__all__ = ["ApiKeyRepositoryProtocol"]
