"""
Domain package - Core business objects with no external dependencies.
"""

from .models import LOW_VALUE_THRESHOLD, Invoice

__all__ = ["Invoice", "LOW_VALUE_THRESHOLD"]
