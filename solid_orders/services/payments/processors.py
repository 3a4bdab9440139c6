"""Payment processors - Open/Closed Principle.

New payment methods are added as new subclasses; nothing that consumes
an IPaymentProcessor needs to change.
"""

import logging
from decimal import Decimal

logger = logging.getLogger(__name__)


class BasePaymentProcessor:
    """Announces a payment on stdout under the method's label."""

    label: str = "payment"

    def process_payment(self, amount: Decimal) -> None:
        """Process a payment of the given amount. Any amount is accepted."""
        logger.debug(f"{type(self).__name__} processing amount {amount}")
        print(f"Processing {self.label} of {amount}")


class CreditCardPayment(BasePaymentProcessor):
    """Credit card payment processing."""

    label = "credit card payment"


class PayPalPayment(BasePaymentProcessor):
    """PayPal payment processing."""

    label = "PayPal payment"
