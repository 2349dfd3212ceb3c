from diagcolor.domain.entities.render_settings import RenderSettings

__all__ = ["RenderSettings"]
