import sys

import typer
from loguru import logger
from rich.console import Console

from diagcolor.application.theme_resolver import ThemeResolver
from diagcolor.cli.commands import language, preview
from diagcolor.domain.entities.render_settings import RenderSettings
from diagcolor.domain.errors import InvalidValueError
from diagcolor.domain.value_objects.theme import parse_theme


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru logging."""
    logger.remove()

    if not verbose:
        logger.disable("diagcolor")
        return

    logger.enable("diagcolor")
    logger.add(
        sys.stderr,
        format="{time:HH:mm:ss} | {level: <8} | {message}",
        level="DEBUG",
    )


def build_resolver(theme: str | None, color: bool | None) -> ThemeResolver:
    """Build a resolver from the environment, then apply explicit flags on top.

    Raises:
        InvalidValueError: If theme (or DIAGCOLOR_THEME) is not a known theme.
    """
    resolver = ThemeResolver(RenderSettings.from_environment(sys.stdout))
    if theme is not None:
        resolver.set_theme(parse_theme(theme))
    if color is not None:
        resolver.set_ansi_enabled(color)
    return resolver


app = typer.Typer(
    name="diagcolor",
    help="Preview and validate theme-aware diagnostic colors",
    no_args_is_help=True,
)

app.command(name="preview")(preview.preview)
app.command(name="language")(language.check_language)


@app.callback()
def main(
    ctx: typer.Context,
    theme: str | None = typer.Option(None, "--theme", "-t", help='Color theme: "light" or "dark"'),
    color: bool | None = typer.Option(
        None, "--color/--no-color", help="Force ANSI colors on or off (default: auto)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
) -> None:
    """diagcolor - theme-aware highlighting for diagnostic output."""
    setup_logging(verbose=verbose)

    try:
        ctx.obj = build_resolver(theme, color)
    except InvalidValueError as e:
        Console(stderr=True).print(f"[red]Invalid theme: {e}[/]", highlight=False)
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
