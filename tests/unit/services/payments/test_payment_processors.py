"""Tests unitarios para los procesadores de pago."""

from decimal import Decimal

import pytest

from solid_orders.services.payments import CreditCardPayment, IPaymentProcessor, PayPalPayment


class TestCreditCardPayment:
    """Tests para el pago con tarjeta de crédito."""

    def test_prints_single_labelled_line(self, capsys):
        """Debe imprimir exactamente una línea con la etiqueta y el monto."""
        CreditCardPayment().process_payment(Decimal("1200"))

        out = capsys.readouterr().out
        assert out.splitlines() == ["Processing credit card payment of 1200"]

    def test_returns_none(self, capsys):
        """No debe retornar valor."""
        assert CreditCardPayment().process_payment(Decimal("1")) is None


class TestPayPalPayment:
    """Tests para el pago con PayPal."""

    def test_prints_single_labelled_line(self, capsys):
        """Debe imprimir exactamente una línea con la etiqueta y el monto."""
        PayPalPayment().process_payment(Decimal("49.90"))

        out = capsys.readouterr().out
        assert out.splitlines() == ["Processing PayPal payment of 49.90"]


class TestPaymentSubstitution:
    """Tests comunes a todas las variantes de pago."""

    @pytest.mark.parametrize("processor_cls", [CreditCardPayment, PayPalPayment])
    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-15.5")])
    def test_any_amount_is_accepted(self, capsys, processor_cls, amount):
        """Montos cero o negativos se procesan sin error."""
        processor_cls().process_payment(amount)

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert str(amount) in lines[0]

    @pytest.mark.parametrize("processor_cls", [CreditCardPayment, PayPalPayment])
    def test_satisfies_payment_protocol(self, processor_cls):
        """Cada variante debe poder usarse donde se espera IPaymentProcessor."""
        processor: IPaymentProcessor = processor_cls()

        assert callable(processor.process_payment)
