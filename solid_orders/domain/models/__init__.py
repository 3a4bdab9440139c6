"""
Domain models for business entities.
"""

from .order import Order

__all__ = ["Order"]
