"""API client module for the comments dashboard."""

from .client import APIError, PlaceholderAPIClient

__all__ = ["APIError", "PlaceholderAPIClient"]
