from diagcolor.domain.value_objects.color_scheme import NO_COLOR, ValueColorScheme
from diagcolor.domain.value_objects.context_key import CONTEXT_VARS, ContextKey, context_var
from diagcolor.domain.value_objects.highlight_category import HighlightCategory, Outcome
from diagcolor.domain.value_objects.language import (
    SUPPORTED_LANGUAGES,
    Language,
    parse_language,
)
from diagcolor.domain.value_objects.palette import (
    HIGHLIGHT_STYLES,
    ORANGE,
    PLAIN_SCHEME,
    VALUE_SCHEMES,
)
from diagcolor.domain.value_objects.theme import Theme, parse_theme
from diagcolor.domain.value_objects.value_kind import ValueKind

__all__ = [
    "CONTEXT_VARS",
    "ContextKey",
    "HIGHLIGHT_STYLES",
    "HighlightCategory",
    "Language",
    "NO_COLOR",
    "ORANGE",
    "Outcome",
    "PLAIN_SCHEME",
    "SUPPORTED_LANGUAGES",
    "Theme",
    "VALUE_SCHEMES",
    "ValueColorScheme",
    "ValueKind",
    "context_var",
    "parse_language",
    "parse_theme",
]
