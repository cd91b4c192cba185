"""
Read-only web dashboard for a course catalog.
"""
from .app import create_app

__all__ = ["create_app"]
