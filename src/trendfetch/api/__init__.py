"""
HTTP API for TrendFetch.
"""
from .app import create_app

__all__ = ["create_app"]
