"""
Strategy factories - Factory pattern for payment and shipping services (OCP).

Each factory keeps a registry from method name to implementation class.
New methods are registered here (or from client code via ``register``)
without modifying the orchestrators that consume them.
"""

import logging
from typing import Callable, ClassVar

from solid_orders.domain.enums import PaymentMethod, ShippingMethod
from solid_orders.services.payments import CreditCardPayment, IPaymentProcessor, PayPalPayment
from solid_orders.services.shipping import ExpressShipping, IShippingService, StandardShipping
from solid_orders.utils.error_handler import UnsupportedMethodException

logger = logging.getLogger(__name__)


def _method_name(method: str) -> str:
    """Normalize an enum member or raw string to its registry key."""
    value = method.value if isinstance(method, (PaymentMethod, ShippingMethod)) else str(method)
    return value.strip().lower()


class PaymentProcessorFactory:
    """Factory for creating payment processors."""

    _registry: ClassVar[dict[str, Callable[[], IPaymentProcessor]]] = {
        PaymentMethod.CREDIT_CARD.value: CreditCardPayment,
        PaymentMethod.PAYPAL.value: PayPalPayment,
    }

    @classmethod
    def create(cls, method: PaymentMethod | str) -> IPaymentProcessor:
        """
        Create a payment processor for the given method.

        Args:
            method: Payment method (enum member or its string value)

        Returns:
            IPaymentProcessor: New payment processor instance

        Raises:
            UnsupportedMethodException: If the method is not registered
        """
        name = _method_name(method)
        processor_cls = cls._registry.get(name)
        if processor_cls is None:
            raise UnsupportedMethodException(method=name, kind="payment", available=cls.available())
        logger.debug(f"Creating payment processor for method '{name}'")
        return processor_cls()

    @classmethod
    def register(cls, method: str, processor_cls: Callable[[], IPaymentProcessor]) -> None:
        """Register (or replace) the implementation for a payment method."""
        cls._registry[_method_name(method)] = processor_cls

    @classmethod
    def available(cls) -> list[str]:
        """Get registered payment method names."""
        return sorted(cls._registry)


class ShippingServiceFactory:
    """Factory for creating shipping services."""

    _registry: ClassVar[dict[str, Callable[[], IShippingService]]] = {
        ShippingMethod.STANDARD.value: StandardShipping,
        ShippingMethod.EXPRESS.value: ExpressShipping,
    }

    @classmethod
    def create(cls, method: ShippingMethod | str) -> IShippingService:
        """
        Create a shipping service for the given method.

        Args:
            method: Shipping method (enum member or its string value)

        Returns:
            IShippingService: New shipping service instance

        Raises:
            UnsupportedMethodException: If the method is not registered
        """
        name = _method_name(method)
        service_cls = cls._registry.get(name)
        if service_cls is None:
            raise UnsupportedMethodException(method=name, kind="shipping", available=cls.available())
        logger.debug(f"Creating shipping service for method '{name}'")
        return service_cls()

    @classmethod
    def register(cls, method: str, service_cls: Callable[[], IShippingService]) -> None:
        """Register (or replace) the implementation for a shipping method."""
        cls._registry[_method_name(method)] = service_cls

    @classmethod
    def available(cls) -> list[str]:
        """Get registered shipping method names."""
        return sorted(cls._registry)
