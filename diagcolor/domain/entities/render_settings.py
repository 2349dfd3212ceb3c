import os
from collections.abc import Mapping
from typing import TextIO

from pydantic import BaseModel

from diagcolor.domain.value_objects.theme import Theme, parse_theme

THEME_ENV_VAR = "DIAGCOLOR_THEME"
NO_COLOR_ENV_VAR = "NO_COLOR"


class RenderSettings(BaseModel, frozen=True):
    """Theme and ANSI flag, always read and replaced as one pair."""

    theme: Theme = Theme.LIGHT
    ansi_enabled: bool = True

    @classmethod
    def from_environment(
        cls,
        stream: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "RenderSettings":
        """Derive settings from NO_COLOR, DIAGCOLOR_THEME and whether stream is a TTY.

        Raises:
            InvalidValueError: If DIAGCOLOR_THEME holds an unknown theme name.
        """
        env = os.environ if environ is None else environ

        theme = Theme.LIGHT
        raw_theme = env.get(THEME_ENV_VAR)
        if raw_theme:
            theme = parse_theme(raw_theme)

        ansi_enabled = not env.get(NO_COLOR_ENV_VAR)
        if ansi_enabled and stream is not None:
            isatty = getattr(stream, "isatty", None)
            ansi_enabled = bool(isatty and isatty())

        return cls(theme=theme, ansi_enabled=ansi_enabled)
