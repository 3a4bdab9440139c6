"""
Entry routine for SOLID Orders.

Builds the sample order, processes its payment and ships it, printing
progress on stdout. With no environment overrides the run uses credit
card payment and express shipping.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from solid_orders.core.config import Settings, get_settings
from solid_orders.core.logging_config import setup_logging
from solid_orders.services.factories import PaymentProcessorFactory, ShippingServiceFactory
from solid_orders.services.orders import OrderFactory, OrderProcessor, OrderService
from solid_orders.utils.error_handler import AppException, ConfigurationException, log_error

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """
    Load settings, reporting invalid environment values as a configuration error.

    Raises:
        ConfigurationException: If a setting fails validation
    """
    try:
        return get_settings()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationException(f"Invalid settings: {fields}", setting=fields or None) from e


def run(settings: Settings) -> None:
    """Process and ship the sample order with the configured strategies."""
    order = OrderFactory.create_sample_order()

    # Select a payment method and process the order
    payment_processor = PaymentProcessorFactory.create(settings.PAYMENT_METHOD)
    order_processor = OrderProcessor(payment_processor)
    order_processor.process_order(order)

    # Select a shipping method and ship the order
    shipping_service = ShippingServiceFactory.create(settings.SHIPPING_METHOD)
    order_service = OrderService(shipping_service)
    order_service.ship(order)


def main(settings: Optional[Settings] = None) -> int:
    """
    Run the entry routine.

    Returns:
        int: Process exit code (0 on success, 1 on application errors)
    """
    try:
        settings = settings or load_settings()
        setup_logging(settings)
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting")

        run(settings)
    except AppException as e:
        log_error(e)
        return 1

    logger.info("Run completed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
