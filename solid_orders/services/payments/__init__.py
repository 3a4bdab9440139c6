"""Payment strategies and their interface."""

from .interfaces import IPaymentProcessor
from .processors import BasePaymentProcessor, CreditCardPayment, PayPalPayment

__all__ = ["IPaymentProcessor", "BasePaymentProcessor", "CreditCardPayment", "PayPalPayment"]
