"""Tests for ThemeResolver."""

import sys
import threading

import pytest
from loguru import logger

from diagcolor.application.theme_resolver import ThemeResolver, default_resolver
from diagcolor.domain.entities.render_settings import RenderSettings
from diagcolor.domain.value_objects.color_scheme import NO_COLOR
from diagcolor.domain.value_objects.highlight_category import HighlightCategory, Outcome
from diagcolor.domain.value_objects.palette import PLAIN_SCHEME, VALUE_SCHEMES
from diagcolor.domain.value_objects.theme import Theme
from diagcolor.domain.value_objects.value_kind import ValueKind


class TestHighlight:
    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            (HighlightCategory.NEUTRAL, "\x1b[38;5;208m42\x1b[0m"),
            (HighlightCategory.PASSING, "\x1b[32m42\x1b[0m"),
            (HighlightCategory.FAILING, "\x1b[31m42\x1b[0m"),
            (HighlightCategory.MUTED, "\x1b[90m42\x1b[0m"),
        ],
    )
    def test_light_theme(
        self, resolver: ThemeResolver, category: HighlightCategory, expected: str
    ) -> None:
        assert resolver.highlight(category, "42") == expected

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            (HighlightCategory.NEUTRAL, "\x1b[96mok\x1b[0m"),
            (HighlightCategory.PASSING, "\x1b[92mok\x1b[0m"),
            (HighlightCategory.FAILING, "\x1b[91mok\x1b[0m"),
            (HighlightCategory.MUTED, "\x1b[37mok\x1b[0m"),
        ],
    )
    def test_dark_theme(
        self, dark_resolver: ThemeResolver, category: HighlightCategory, expected: str
    ) -> None:
        assert dark_resolver.highlight(category, "ok") == expected

    @pytest.mark.parametrize("theme", list(Theme))
    @pytest.mark.parametrize("category", list(HighlightCategory))
    def test_ansi_disabled_is_plain(self, theme: Theme, category: HighlightCategory) -> None:
        resolver = ThemeResolver(RenderSettings(theme=theme, ansi_enabled=False))
        output = resolver.highlight(category, "value", 1)
        assert output == "value 1"
        assert "\x1b" not in output

    def test_values_are_space_joined(self, plain_resolver: ThemeResolver) -> None:
        assert plain_resolver.highlight(HighlightCategory.FAILING, "x", "y") == "x y"
        assert plain_resolver.highlight(HighlightCategory.NEUTRAL, 1, None, 2.5) == "1 None 2.5"

    def test_any_value_is_stringified(self, resolver: ThemeResolver) -> None:
        output = resolver.highlight(HighlightCategory.PASSING, ["a"], {"k": 1})
        assert output == "\x1b[32m['a'] {'k': 1}\x1b[0m"

    def test_no_values(self, resolver: ThemeResolver) -> None:
        assert resolver.highlight(HighlightCategory.NEUTRAL) == ""

    def test_unprintable_value_does_not_raise(self, resolver: ThemeResolver) -> None:
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("nope")

        output = resolver.highlight(HighlightCategory.NEUTRAL, "before", Broken())
        assert output == "\x1b[38;5;208mbefore <unprintable Broken: RuntimeError: nope>\x1b[0m"

    def test_unprintable_value_plain(self, plain_resolver: ThemeResolver) -> None:
        class Broken:
            def __str__(self) -> str:
                raise ValueError("bad")

        output = plain_resolver.highlight_failing_string(Broken(), 1)
        assert output == "<unprintable Broken: ValueError: bad> 1"

    def test_idempotent(self, dark_resolver: ThemeResolver) -> None:
        first = dark_resolver.highlight(HighlightCategory.NEUTRAL, "same", 1)
        second = dark_resolver.highlight(HighlightCategory.NEUTRAL, "same", 1)
        assert first == second

    def test_named_helpers(self, resolver: ThemeResolver) -> None:
        assert resolver.highlight_string("a") == resolver.highlight(HighlightCategory.NEUTRAL, "a")
        assert resolver.highlight_passing_string("a") == "\x1b[32ma\x1b[0m"
        assert resolver.highlight_failing_string("a") == "\x1b[31ma\x1b[0m"
        assert resolver.highlight_gray_string("a") == "\x1b[90ma\x1b[0m"

    def test_highlight_style(self, resolver: ThemeResolver, plain_resolver: ThemeResolver) -> None:
        assert resolver.highlight_style(HighlightCategory.PASSING) == "green"
        assert plain_resolver.highlight_style(HighlightCategory.PASSING) == NO_COLOR


class TestStateChanges:
    def test_defaults(self, resolver: ThemeResolver) -> None:
        assert resolver.theme == Theme.LIGHT
        assert resolver.ansi_enabled is True

    def test_set_theme_takes_effect_immediately(self, resolver: ThemeResolver) -> None:
        assert resolver.highlight_passing_string("ok") == "\x1b[32mok\x1b[0m"
        resolver.set_theme(Theme.DARK)
        assert resolver.highlight_passing_string("ok") == "\x1b[92mok\x1b[0m"
        resolver.set_theme(Theme.LIGHT)
        assert resolver.highlight_passing_string("ok") == "\x1b[32mok\x1b[0m"

    def test_set_ansi_enabled(self, dark_resolver: ThemeResolver) -> None:
        dark_resolver.set_ansi_enabled(False)
        assert dark_resolver.highlight_passing_string("ok") == "ok"
        assert dark_resolver.theme == Theme.DARK
        dark_resolver.set_ansi_enabled(True)
        assert dark_resolver.highlight_passing_string("ok") == "\x1b[92mok\x1b[0m"

    def test_setters_replace_settings(self, resolver: ThemeResolver) -> None:
        before = resolver.settings
        resolver.set_theme(Theme.DARK)
        assert before.theme == Theme.LIGHT
        assert resolver.settings == RenderSettings(theme=Theme.DARK, ansi_enabled=True)

    def test_instances_are_independent(self) -> None:
        first = ThemeResolver()
        second = ThemeResolver()
        first.set_theme(Theme.DARK)
        assert second.theme == Theme.LIGHT

    def test_state_changes_are_logged_when_enabled(self, resolver: ThemeResolver) -> None:
        messages: list[str] = []
        handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
        logger.enable("diagcolor")
        try:
            resolver.set_theme(Theme.DARK)
            resolver.set_ansi_enabled(False)
        finally:
            logger.disable("diagcolor")
            logger.remove(handler_id)
        assert "Theme set to dark" in messages
        assert "ANSI output disabled" in messages

    def test_library_use_writes_nothing_to_stderr(
        self, resolver: ThemeResolver, capsys: pytest.CaptureFixture[str]
    ) -> None:
        handler_id = logger.add(sys.stderr, level="DEBUG")
        try:
            resolver.set_theme(Theme.DARK)
            resolver.set_ansi_enabled(False)
            resolver.highlight(HighlightCategory.PASSING, "ok")
        finally:
            logger.remove(handler_id)
        assert capsys.readouterr().err == ""

    def test_concurrent_updates_keep_pairs_consistent(self) -> None:
        resolver = ThemeResolver()
        valid = {"\x1b[32mok\x1b[0m", "\x1b[92mok\x1b[0m", "ok"}
        seen: set[str] = set()
        stop = threading.Event()

        def writer() -> None:
            for i in range(500):
                resolver.set_theme(Theme.DARK if i % 2 else Theme.LIGHT)
                resolver.set_ansi_enabled(i % 3 != 0)
            stop.set()

        def reader() -> None:
            while not stop.is_set():
                seen.add(resolver.highlight_passing_string("ok"))

        threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert seen <= valid


class TestValueColorScheme:
    @pytest.mark.parametrize("outcome", list(Outcome))
    def test_light_scheme(self, resolver: ThemeResolver, outcome: Outcome) -> None:
        assert resolver.resolve_value_color_scheme(outcome) == VALUE_SCHEMES[Theme.LIGHT][outcome]

    @pytest.mark.parametrize("outcome", list(Outcome))
    def test_dark_scheme(self, dark_resolver: ThemeResolver, outcome: Outcome) -> None:
        scheme = dark_resolver.resolve_value_color_scheme(outcome)
        assert scheme == VALUE_SCHEMES[Theme.DARK][outcome]

    @pytest.mark.parametrize("theme", list(Theme))
    @pytest.mark.parametrize("outcome", list(Outcome))
    def test_ansi_disabled_uses_plain_scheme(self, theme: Theme, outcome: Outcome) -> None:
        resolver = ThemeResolver(RenderSettings(theme=theme, ansi_enabled=False))
        assert resolver.resolve_value_color_scheme(outcome) is PLAIN_SCHEME

    @pytest.mark.parametrize("outcome", list(Outcome))
    def test_themes_are_distinguishable(self, outcome: Outcome) -> None:
        light = ThemeResolver(RenderSettings(theme=Theme.LIGHT)).resolve_value_color_scheme(outcome)
        dark = ThemeResolver(RenderSettings(theme=Theme.DARK)).resolve_value_color_scheme(outcome)
        assert any(light.style_for(kind) != dark.style_for(kind) for kind in ValueKind)

    def test_named_helpers(self, dark_resolver: ThemeResolver) -> None:
        passing = VALUE_SCHEMES[Theme.DARK][Outcome.PASSING]
        failing = VALUE_SCHEMES[Theme.DARK][Outcome.FAILING]
        assert dark_resolver.get_passing_color_scheme() == passing
        assert dark_resolver.get_failing_color_scheme() == failing


class TestPformat:
    def test_plain_output(self, plain_resolver: ThemeResolver) -> None:
        assert plain_resolver.pformat({"ok": True}) == 'dict(1){\n  "ok": True,\n}'

    def test_failing_outcome_colors(self, resolver: ThemeResolver) -> None:
        quote = '\x1b[1;31m"\x1b[0m'
        expected = f"{quote}\x1b[31mx\x1b[0m{quote}"
        assert resolver.pformat("x", Outcome.FAILING) == expected

    def test_dark_theme_colors(self, dark_resolver: ThemeResolver) -> None:
        assert dark_resolver.pformat(None) == "\x1b[1;33mNone\x1b[0m"


def test_default_resolver_is_shared() -> None:
    assert default_resolver() is default_resolver()
