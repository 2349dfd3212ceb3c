import pytest

from diagcolor.application.theme_resolver import ThemeResolver
from diagcolor.domain.entities.render_settings import RenderSettings
from diagcolor.domain.value_objects.theme import Theme


@pytest.fixture
def resolver() -> ThemeResolver:
    return ThemeResolver()


@pytest.fixture
def dark_resolver() -> ThemeResolver:
    return ThemeResolver(RenderSettings(theme=Theme.DARK))


@pytest.fixture
def plain_resolver() -> ThemeResolver:
    return ThemeResolver(RenderSettings(ansi_enabled=False))
