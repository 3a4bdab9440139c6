"""
Order services package.

This package contains the orchestrators that process and ship orders,
following SOLID principles for better maintainability.
"""

from .factories import OrderFactory
from .order_processor import OrderProcessor
from .order_service import OrderService

__all__ = ["OrderFactory", "OrderProcessor", "OrderService"]
