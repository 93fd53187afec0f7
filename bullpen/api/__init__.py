"""Bullpen API package - FastAPI backend for the franchise engine."""

from bullpen.api.main import app, create_app

__all__ = ["app", "create_app"]
