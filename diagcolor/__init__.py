"""Theme-aware highlighting and pretty-printing for diagnostic CLI output."""

from loguru import logger

from diagcolor.application.theme_resolver import ThemeResolver, default_resolver
from diagcolor.domain.entities.render_settings import RenderSettings
from diagcolor.domain.errors import InvalidValueError
from diagcolor.domain.services.value_printer import ValuePrinter
from diagcolor.domain.value_objects import (
    HighlightCategory,
    Language,
    Outcome,
    Theme,
    ValueColorScheme,
    ValueKind,
    parse_language,
    parse_theme,
)

# Silent unless the host opts in with logger.enable("diagcolor")
logger.disable("diagcolor")

__all__ = [
    "HighlightCategory",
    "InvalidValueError",
    "Language",
    "Outcome",
    "RenderSettings",
    "Theme",
    "ThemeResolver",
    "ValueColorScheme",
    "ValueKind",
    "ValuePrinter",
    "default_resolver",
    "parse_language",
    "parse_theme",
]
