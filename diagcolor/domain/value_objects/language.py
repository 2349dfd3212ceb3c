from enum import Enum

from diagcolor.domain.errors import InvalidValueError


class Language(str, Enum):
    UNKNOWN = "Unknown"
    GO = "go"
    JAVA = "java"
    PYTHON = "python"
    JAVASCRIPT = "javascript"

    def __str__(self) -> str:
        return self.value


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language.GO,
    Language.JAVA,
    Language.PYTHON,
    Language.JAVASCRIPT,
)


def parse_language(value: str) -> Language:
    """Parse a language name; ``Unknown`` is never accepted from user input."""
    for language in SUPPORTED_LANGUAGES:
        if language.value == value:
            return language
    raise InvalidValueError(value, [language.value for language in SUPPORTED_LANGUAGES])
