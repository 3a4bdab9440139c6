"""Shipping strategies and their interface."""

from .carriers import BaseShippingService, ExpressShipping, StandardShipping
from .interfaces import IShippingService

__all__ = ["IShippingService", "BaseShippingService", "StandardShipping", "ExpressShipping"]
