from enum import Enum

from diagcolor.domain.errors import InvalidValueError


class Theme(str, Enum):
    LIGHT = "light"  # default, tuned for light terminal backgrounds
    DARK = "dark"

    def __str__(self) -> str:
        return self.value


def parse_theme(value: str) -> Theme:
    """Parse a user-supplied theme name such as ``"dark"`` or ``" Light "``."""
    normalized = value.strip().lower()
    for theme in Theme:
        if theme.value == normalized:
            return theme
    raise InvalidValueError(value, [theme.value for theme in Theme])
