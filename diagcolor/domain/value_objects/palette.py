"""Color palettes for highlighted strings and pretty-printed values.

All colors live here as static lookup tables. Styles use Rich syntax
(e.g. "green", "bold cyan", "color(208)").
"""

from diagcolor.domain.value_objects.color_scheme import ValueColorScheme
from diagcolor.domain.value_objects.highlight_category import HighlightCategory, Outcome
from diagcolor.domain.value_objects.theme import Theme

# 256-color orange, SGR 38;5;208
ORANGE = "color(208)"

HIGHLIGHT_STYLES: dict[Theme, dict[HighlightCategory, str]] = {
    Theme.LIGHT: {
        HighlightCategory.NEUTRAL: ORANGE,
        HighlightCategory.PASSING: "green",
        HighlightCategory.FAILING: "red",
        HighlightCategory.MUTED: "bright_black",
    },
    Theme.DARK: {
        HighlightCategory.NEUTRAL: "bright_cyan",
        HighlightCategory.PASSING: "bright_green",
        HighlightCategory.FAILING: "bright_red",
        HighlightCategory.MUTED: "white",
    },
}

PLAIN_SCHEME = ValueColorScheme()

VALUE_SCHEMES: dict[Theme, dict[Outcome, ValueColorScheme]] = {
    Theme.LIGHT: {
        Outcome.PASSING: ValueColorScheme(
            string="green",
            string_quotation="bold green",
            field_name="white",
            integer="bold blue",
            struct_name="none",
            boolean="bold cyan",
            float="bold magenta",
            escaped_char="bold magenta",
            pointer_address="bold blue",
            null="bold cyan",
            timestamp="bold blue",
            container_length="blue",
        ),
        Outcome.FAILING: ValueColorScheme(
            boolean="bold cyan",
            integer="bold blue",
            float="bold magenta",
            string="red",
            string_quotation="bold red",
            escaped_char="bold magenta",
            field_name="yellow",
            pointer_address="bold blue",
            null="bold cyan",
            timestamp="bold blue",
            struct_name="white",
            container_length="blue",
        ),
    },
    Theme.DARK: {
        Outcome.PASSING: ValueColorScheme(
            string="bold green",
            string_quotation="bold green",
            field_name="cyan",
            integer="bold cyan",
            struct_name="bold white",
            boolean="bold yellow",
            float="bold magenta",
            escaped_char="bold magenta",
            pointer_address="bold cyan",
            null="bold yellow",
            timestamp="bold cyan",
            container_length="cyan",
        ),
        Outcome.FAILING: ValueColorScheme(
            boolean="bold yellow",
            integer="bold cyan",
            float="bold magenta",
            string="bold red",
            string_quotation="bold red",
            escaped_char="bold magenta",
            field_name="bold yellow",
            pointer_address="bold cyan",
            null="bold yellow",
            timestamp="bold cyan",
            struct_name="bold white",
            container_length="cyan",
        ),
    },
}
