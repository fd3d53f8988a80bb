"""FastAPI dependencies for API key authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader

from nvc_exercises.application.identity.use_cases.api_key_use_case import ApiKeyUseCase
from nvc_exercises.domain.identity.entities import ApiKey
from nvc_exercises.domain.identity.exceptions import InvalidApiKeyError
from nvc_exercises.infrastructure.common.di import inject_use_case

_BEARER_PREFIX = "bearer "

authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="API key, optionally prefixed with 'Bearer '",
)


def extract_api_key(authorization: str | None) -> str | None:
    """Strip an optional 'Bearer ' prefix from the Authorization header value."""
    if authorization is None:
        return None
    value = authorization.strip()
    if value.lower().startswith(_BEARER_PREFIX):
        value = value[len(_BEARER_PREFIX) :].strip()
    return value or None


def get_current_api_key(
    authorization: Annotated[str | None, Depends(authorization_header)],
    use_case: Annotated[ApiKeyUseCase, Depends(inject_use_case("api_key_use_case"))],
) -> ApiKey:
    """
    Authenticate the caller from the Authorization header.

    Args:
        authorization: Raw header value
        use_case: ApiKeyUseCase injected via dependency container

    Returns:
        The validated ApiKey

    Raises:
        InvalidApiKeyError: If the key is missing, unknown or revoked; the
            application's exception handler answers it with 401
    """
    presented = extract_api_key(authorization)
    if presented is None:
        raise InvalidApiKeyError

    return use_case.validate(presented)


CurrentApiKey = Annotated[ApiKey, Depends(get_current_api_key)]
