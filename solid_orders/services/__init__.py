"""
Services package for SOLID Orders.

Payment and shipping strategies live in their own subpackages behind
narrow interfaces (ISP); the order orchestrators depend only on those
interfaces (DIP).
"""
