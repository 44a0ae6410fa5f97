"""Azure Functions v2 programming model entry point."""

from app import app  # noqa: F401
