"""API route modules."""

from blogstore.api.routes import health, posts

__all__ = ["health", "posts"]
