"""
SOLID Orders.

Order processing illustrated through the five SOLID principles: an order
value object, interchangeable payment and shipping strategies, and thin
orchestrators that depend on those strategies through abstractions.
"""

from solid_orders.version import get_version

__version__ = get_version()
