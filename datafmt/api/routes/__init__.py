"""API routers."""

from datafmt.api.routes import health, templates

__all__ = ["health", "templates"]
