from .api_key_schemas import ApiKeySummary, IssuedApiKeyResponse

__all__ = ["ApiKeySummary", "IssuedApiKeyResponse"]
