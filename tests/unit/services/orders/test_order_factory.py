"""Tests unitarios para OrderFactory."""

from decimal import Decimal

from solid_orders.domain.models import Order
from solid_orders.services.orders import OrderFactory


class TestOrderFactory:
    """Tests para la creación de órdenes."""

    def test_create_sample_order(self):
        """Debe crear la orden de ejemplo 101 de Ali."""
        order = OrderFactory.create_sample_order()

        assert order == Order(101, "Ali", ["Laptop", "Mouse", "Keyboard"], Decimal("1200"))

    def test_create_order_accepts_any_iterable(self):
        """Debe aceptar cualquier iterable de artículos y guardarlo como lista."""
        order = OrderFactory.create_order(5, "Ana", ("Mouse", "Laptop"), "30")

        assert order.items == ["Mouse", "Laptop"]
        assert order.total_amount == Decimal("30")

    def test_sample_orders_are_independent(self):
        """Cada llamada debe devolver una instancia nueva."""
        assert OrderFactory.create_sample_order() is not OrderFactory.create_sample_order()
