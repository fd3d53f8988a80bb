"""Bulk loading of exercises from a JSON seed file."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from nvc_exercises.application.content.protocols import ExerciseRepositoryProtocol
from nvc_exercises.domain.common.exceptions import ValidationError
from nvc_exercises.infrastructure.content.schemas import ExerciseSeed

logger = logging.getLogger(__name__)

_seed_list_adapter = TypeAdapter(list[ExerciseSeed])


class ExerciseSeedLoader:
    """
    Loads a seed file into an empty exercise table.

    The file is a JSON array of exercises in the language-map shape. Steps are
    given as ``[{"en": ..., "zh": ...}, ...]``, so the English and Chinese step
    lists are aligned by construction.
    """

    def __init__(self, exercise_repository: ExerciseRepositoryProtocol) -> None:
        self.exercise_repository = exercise_repository

    def load(self, path: Path, *, force: bool = False) -> int:
        """
        Validate and insert every exercise in ``path``.

        Args:
            path: Seed file location
            force: Insert even if exercises already exist

        Returns:
            Number of exercises inserted; 0 when skipped

        Raises:
            ValidationError: If the file is not valid JSON or an exercise is malformed
            FileNotFoundError: If the file does not exist
        """
        existing = self.exercise_repository.count()
        if existing and not force:
            logger.info(f"Database already holds {existing} exercises, skipping {path}")
            return 0

        raw = path.read_text(encoding="utf-8")
        try:
            seeds = _seed_list_adapter.validate_json(raw)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid seed file {path}: {e}", field="seed_file") from e

        exercises = [seed.to_domain() for seed in seeds]
        saved = self.exercise_repository.add_all(exercises)
        logger.info(f"Loaded {len(saved)} exercises from {path}")
        return len(saved)
