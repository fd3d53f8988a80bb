"""Supported content languages."""

from enum import StrEnum
from typing import Self

from nvc_exercises.domain.common.exceptions import ValidationError


class Language(StrEnum):
    """The two languages every exercise is written in."""

    EN = "en"
    ZH = "zh"

    @classmethod
    def from_code(cls, code: str) -> Self:
        """
        Resolve a language code.

        Raises:
            InvalidLanguageError: If the code is not one of the supported languages
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidLanguageError(code) from None


class InvalidLanguageError(ValidationError):
    """Raised for a language code outside the supported set."""

    def __init__(self, code: str) -> None:
        super().__init__("Invalid language. Use 'en' or 'zh'.", field="lang", value=code)
