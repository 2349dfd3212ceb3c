import typer

from diagcolor.application.theme_resolver import ThemeResolver
from diagcolor.domain.errors import InvalidValueError
from diagcolor.domain.value_objects.language import parse_language


def check_language(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Language name to validate"),
) -> None:
    """Validate a language name."""
    resolver: ThemeResolver = ctx.obj
    try:
        language = parse_language(value)
    except InvalidValueError as e:
        message = resolver.highlight_failing_string(f"Invalid language '{value}':", e)
        typer.echo(message, color=True)
        raise typer.Exit(1) from e

    typer.echo(resolver.highlight_passing_string(language.value), color=True)
