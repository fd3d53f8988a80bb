"""API routes for reading exercises."""

import logging
import re
from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from nvc_exercises.application.content.queries import ExerciseFilter
from nvc_exercises.application.content.use_cases.exercise_query_use_case import (
    ExerciseQueryUseCase,
)
from nvc_exercises.domain.common.exceptions import DomainError
from nvc_exercises.domain.content.services import ProjectedExercise
from nvc_exercises.domain.content.value_objects import Language
from nvc_exercises.exceptions import InvalidExerciseIdError, NvcError
from nvc_exercises.infrastructure.common.di import inject_use_case
from nvc_exercises.infrastructure.content.schemas import ExerciseResponse
from nvc_exercises.infrastructure.identity.dependencies import CurrentApiKey

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exercises", tags=["exercises"])

_EXERCISE_ID_PATTERN = re.compile(r"[0-9]+")

ExerciseQueryDependency = Annotated[
    ExerciseQueryUseCase, Depends(inject_use_case("exercise_query_use_case"))
]


def _to_response(projected: ProjectedExercise) -> ExerciseResponse:
    return ExerciseResponse.model_validate(asdict(projected))


def _parse_language(lang: str | None) -> Language | None:
    # Empty ?lang= behaves like an omitted one
    return Language.from_code(lang) if lang else None


@router.get(
    "",
    response_model=list[ExerciseResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def list_exercises(
    api_key: CurrentApiKey,
    use_case: ExerciseQueryDependency,
    category: str | None = Query(None, description="Exercise category"),
    difficulty: str | None = Query(None, description="beginner, intermediate or advanced"),
    audience: str | None = Query(None, description="individual or group"),
    lang: str | None = Query(None, description="Collapse bilingual fields to 'en' or 'zh'"),
) -> list[ExerciseResponse]:
    """
    List exercises, optionally filtered and resolved to one language.

    Args:
        api_key: Authenticated API key
        use_case: ExerciseQueryUseCase injected via dependency container
        category: Exact category to match
        difficulty: Exact difficulty to match
        audience: Exact audience to match
        lang: Language code; omitted means both languages as a map

    Returns:
        Projected exercises matching every provided filter

    Raises:
        HTTPException: If a parameter is invalid or fetching fails
    """
    try:
        language = _parse_language(lang)
        exercise_filter = ExerciseFilter.parse(
            category=category, difficulty=difficulty, audience=audience
        )
        projected = use_case.list_exercises(exercise_filter, language)
        return [_to_response(item) for item in projected]
    except (NvcError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list exercises for key {api_key.id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e


@router.get(
    "/{exercise_id}",
    response_model=ExerciseResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_exercise(
    exercise_id: str,
    api_key: CurrentApiKey,
    use_case: ExerciseQueryDependency,
    lang: str | None = Query(None, description="Collapse bilingual fields to 'en' or 'zh'"),
) -> ExerciseResponse:
    """
    Get a single exercise by ID.

    Args:
        exercise_id: Numeric exercise ID
        api_key: Authenticated API key
        use_case: ExerciseQueryUseCase injected via dependency container
        lang: Language code; omitted means both languages as a map

    Returns:
        The projected exercise

    Raises:
        HTTPException: If the ID is malformed, the exercise is missing or fetching fails
    """
    try:
        language = _parse_language(lang)
        if not _EXERCISE_ID_PATTERN.fullmatch(exercise_id):
            raise InvalidExerciseIdError(exercise_id)
        projected = use_case.get_exercise(int(exercise_id), language)
        return _to_response(projected)
    except (NvcError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch exercise {exercise_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e
