from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from nvc_exercises.application.content.use_cases.exercise_query_use_case import (
    ExerciseQueryUseCase,
)
from nvc_exercises.application.identity.use_cases.api_key_use_case import ApiKeyUseCase
from nvc_exercises.config import get_settings
from nvc_exercises.domain.content.services import ExerciseProjector
from nvc_exercises.infrastructure.content.repositories import ExerciseRepository
from nvc_exercises.infrastructure.content.services.seed_loader import ExerciseSeedLoader
from nvc_exercises.infrastructure.identity.repositories import ApiKeyRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    exercise_repository = providers.Factory(ExerciseRepository, db=db)
    api_key_repository = providers.Factory(ApiKeyRepository, db=db)

    # Domain services (pure domain logic, no db)
    exercise_projector = providers.Singleton(ExerciseProjector)

    # Content module use cases
    exercise_query_use_case = providers.Factory(
        ExerciseQueryUseCase,
        exercise_repository=exercise_repository,
        projector=exercise_projector,
    )
    exercise_seed_loader = providers.Factory(
        ExerciseSeedLoader,
        exercise_repository=exercise_repository,
    )

    # Identity use cases
    api_key_use_case = providers.Factory(
        ApiKeyUseCase,
        api_key_repository=api_key_repository,
        key_prefix=settings.provided.API_KEY_PREFIX,
    )


def build_container(db: Session) -> Container:
    """Create a container bound to one database session."""
    return Container(db=db)
