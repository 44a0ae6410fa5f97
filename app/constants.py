"""Shared constants for upload grant Function routes."""

API_TITLE = "Upload Grant Service API"
API_VERSION = "1.0.0"
GRANT_LOG_PREFIX = "credentials"
