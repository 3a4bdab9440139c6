"""OrderProcessor service - Liskov Substitution Principle.

Works identically with any IPaymentProcessor implementation.
"""

import logging

from solid_orders.domain.models import Order
from solid_orders.services.payments.interfaces import IPaymentProcessor

logger = logging.getLogger(__name__)


class OrderProcessor:
    """Processes orders and hands the payment to an injected processor."""

    def __init__(self, payment_processor: IPaymentProcessor):
        """
        Initialize with payment dependency (DIP).

        Args:
            payment_processor: Any payment processor (credit card, PayPal, ...)
        """
        self.payment_processor = payment_processor

    def process_order(self, order: Order) -> None:
        """
        Process the order and handle the payment.

        Prints the order summary, delegates the payment for the order total,
        then prints a completion message. Errors raised by the payment
        processor propagate unchanged.

        Args:
            order: Order to process
        """
        logger.info(f"Processing order {order.order_id} with {type(self.payment_processor).__name__}")

        print(f"Processing Order #{order.order_id} for {order.customer_name}")
        print(f"Total Amount: {order.total_amount}")

        self.payment_processor.process_payment(order.total_amount)

        print("Order processed successfully!")
        logger.debug(f"Order {order.order_id} processed")
