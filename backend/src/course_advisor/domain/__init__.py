"""
Domain models for the course catalog.
"""
from .models import Course, LoadResult

__all__ = ["Course", "LoadResult"]
