import threading
from typing import Any

from loguru import logger
from rich.color import ColorSystem
from rich.style import Style

from diagcolor.domain.entities.render_settings import RenderSettings
from diagcolor.domain.services.value_printer import ValuePrinter
from diagcolor.domain.value_objects.color_scheme import NO_COLOR, ValueColorScheme
from diagcolor.domain.value_objects.highlight_category import HighlightCategory, Outcome
from diagcolor.domain.value_objects.palette import HIGHLIGHT_STYLES, PLAIN_SCHEME, VALUE_SCHEMES
from diagcolor.domain.value_objects.theme import Theme


class ThemeResolver:
    """Selects colors for diagnostic output from the active theme and ANSI flag.

    Resolution order:
    1. ANSI disabled: plain text / the colorless value scheme, whatever the theme.
    2. Dark theme: the dark palette.
    3. Otherwise: the light palette.

    Settings are held as one immutable RenderSettings that setters replace
    under a lock, so every call sees a consistent (theme, ansi_enabled) pair.
    Nothing is cached; a setter takes effect on the next call.
    """

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self._settings = settings or RenderSettings()
        self._lock = threading.Lock()

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    @property
    def theme(self) -> Theme:
        return self._settings.theme

    @property
    def ansi_enabled(self) -> bool:
        return self._settings.ansi_enabled

    def set_theme(self, theme: Theme) -> None:
        with self._lock:
            self._settings = self._settings.model_copy(update={"theme": theme})
        logger.debug("Theme set to {}", theme.value)

    def set_ansi_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._settings = self._settings.model_copy(update={"ansi_enabled": enabled})
        logger.debug("ANSI output {}", "enabled" if enabled else "disabled")

    def highlight_style(self, category: HighlightCategory) -> str:
        """Rich style for category, or "none" when ANSI is disabled."""
        return _highlight_style(self._settings, category)

    def highlight(self, category: HighlightCategory, *values: Any) -> str:
        settings = self._settings
        text = " ".join(_stringify(value) for value in values)
        if not settings.ansi_enabled:
            return text
        style = Style.parse(_highlight_style(settings, category))
        return style.render(text, color_system=ColorSystem.EIGHT_BIT)

    def resolve_value_color_scheme(self, outcome: Outcome) -> ValueColorScheme:
        return _value_scheme(self._settings, outcome)

    def pformat(self, value: Any, outcome: Outcome = Outcome.PASSING) -> str:
        """Pretty-print value with the scheme for outcome."""
        settings = self._settings
        printer = ValuePrinter(_value_scheme(settings, outcome))
        return printer.pformat(value, ansi=settings.ansi_enabled)

    def highlight_string(self, *values: Any) -> str:
        return self.highlight(HighlightCategory.NEUTRAL, *values)

    def highlight_passing_string(self, *values: Any) -> str:
        return self.highlight(HighlightCategory.PASSING, *values)

    def highlight_failing_string(self, *values: Any) -> str:
        return self.highlight(HighlightCategory.FAILING, *values)

    def highlight_gray_string(self, *values: Any) -> str:
        return self.highlight(HighlightCategory.MUTED, *values)

    def get_passing_color_scheme(self) -> ValueColorScheme:
        return self.resolve_value_color_scheme(Outcome.PASSING)

    def get_failing_color_scheme(self) -> ValueColorScheme:
        return self.resolve_value_color_scheme(Outcome.FAILING)


def _stringify(value: Any) -> str:
    try:
        return str(value)
    except Exception as e:
        return f"<unprintable {type(value).__name__}: {type(e).__name__}: {e}>"


def _highlight_style(settings: RenderSettings, category: HighlightCategory) -> str:
    if not settings.ansi_enabled:
        return NO_COLOR
    return HIGHLIGHT_STYLES[settings.theme][category]


def _value_scheme(settings: RenderSettings, outcome: Outcome) -> ValueColorScheme:
    if not settings.ansi_enabled:
        return PLAIN_SCHEME
    return VALUE_SCHEMES[settings.theme][outcome]


_default_resolver: ThemeResolver | None = None


def default_resolver() -> ThemeResolver:
    """Shared resolver for callers that do not inject their own."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ThemeResolver()
    return _default_resolver
