"""Route modules registered with the shared FunctionApp."""

from . import credentials, docs  # noqa: F401

__all__ = ["credentials", "docs"]
