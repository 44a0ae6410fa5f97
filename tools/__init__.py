"""Developer tooling for local testing."""
