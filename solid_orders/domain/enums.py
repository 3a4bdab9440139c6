"""
Domain enums naming the interchangeable strategies.
"""

from enum import Enum


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"


class ShippingMethod(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
