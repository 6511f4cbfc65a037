"""A layered JSON web service for storing and listing posts in SQLite."""

__version__ = "0.1.0"
__all__ = ["app", "controller", "entity", "repository", "router", "service"]