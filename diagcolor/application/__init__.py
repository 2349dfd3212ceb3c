from diagcolor.application.theme_resolver import ThemeResolver, default_resolver

__all__ = ["ThemeResolver", "default_resolver"]
