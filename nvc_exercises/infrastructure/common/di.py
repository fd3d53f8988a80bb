from collections.abc import Callable
from typing import Any

from nvc_exercises.core import build_container
from nvc_exercises.database import DatabaseSession


def inject_use_case(provider_name: str) -> Callable[[DatabaseSession], Any]:
    """
    Create a FastAPI dependency for a container provider.

    Every request gets its own container bound to its own database session,
    so concurrent requests never share a session.
    """

    def dependency(db: DatabaseSession) -> Any:  # noqa: ANN401
        container = build_container(db)
        return getattr(container, provider_name)()

    return dependency
