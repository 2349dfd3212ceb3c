from dataclasses import dataclass, field
from datetime import datetime

import typer
from rich.console import Console

from diagcolor.application.theme_resolver import ThemeResolver
from diagcolor.domain.constants import BASE_TIME, DEFAULT_INCOMING_PROXY_PORT, HTTP_CLIENT
from diagcolor.domain.value_objects.highlight_category import HighlightCategory, Outcome

console = Console(highlight=False)


@dataclass
class SampleMock:
    kind: str
    name: str
    port: int
    latency_ms: float
    passed: bool
    recorded_at: datetime
    note: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


def sample_value() -> SampleMock:
    return SampleMock(
        kind=HTTP_CLIENT,
        name="mock-0",
        port=DEFAULT_INCOMING_PROXY_PORT,
        latency_ms=12.5,
        passed=True,
        recorded_at=BASE_TIME,
        headers={"Content-Type": "application/json", "X-Trace": "a\tb"},
    )


def preview(
    ctx: typer.Context,
    outcome: Outcome = typer.Option(Outcome.PASSING, "--outcome", "-o", help="Value scheme"),
) -> None:
    """Show each highlight category and a pretty-printed sample value."""
    resolver: ThemeResolver = ctx.obj
    settings = resolver.settings
    mode = "ansi" if settings.ansi_enabled else "plain"

    console.print(f"theme: {settings.theme.value} ({mode})")
    for category in HighlightCategory:
        line = resolver.highlight(category, "sample", 42)
        typer.echo(f"  {category.value:<8} {line}", color=True)

    console.print()
    typer.echo(resolver.pformat(sample_value(), outcome), color=True)
