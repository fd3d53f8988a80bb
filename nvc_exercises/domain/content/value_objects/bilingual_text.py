"""Bilingual text value object."""

from dataclasses import dataclass
from typing import Self

from nvc_exercises.domain.common.exceptions import ValidationError
from nvc_exercises.domain.common.value_object import ValueObject

from .language import Language


@dataclass(frozen=True, eq=False)
class BilingualText(ValueObject):
    """
    The same text in English and Chinese.

    Both variants are required; an optional bilingual field is modelled as
    ``BilingualText | None`` rather than as a pair with a missing half.
    """

    en: str
    zh: str

    def __post_init__(self) -> None:
        if not self.en or not self.en.strip():
            raise ValidationError("English text cannot be empty", field="en")
        if not self.zh or not self.zh.strip():
            raise ValidationError("Chinese text cannot be empty", field="zh")

    def in_language(self, language: Language) -> str:
        """Return the variant written in ``language``."""
        match language:
            case Language.EN:
                return self.en
            case Language.ZH:
                return self.zh

    def to_map(self) -> dict[str, str]:
        """Language map keyed by language code."""
        return {Language.EN.value: self.en, Language.ZH.value: self.zh}

    @classmethod
    def from_columns(cls, en: str | None, zh: str | None) -> Self | None:
        """Build a pair from two nullable columns; None unless both variants are present."""
        if not en or not zh:
            return None
        return cls(en=en, zh=zh)
