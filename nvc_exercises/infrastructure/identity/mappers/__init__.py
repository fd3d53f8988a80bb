from .api_key_mapper import ApiKeyMapper

__all__ = ["ApiKeyMapper"]
