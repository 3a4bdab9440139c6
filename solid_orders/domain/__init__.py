"""
Domain layer for SOLID Orders.

This layer contains the order value object and the enumerations naming
the available payment and shipping strategies.
"""
