"""Tests unitarios para el sistema de manejo de errores."""

import logging

from solid_orders.utils.error_handler import (
    AppException,
    ConfigurationException,
    ErrorCode,
    ErrorSeverity,
    UnsupportedMethodException,
    log_error,
)


class TestAppException:
    """Tests para la excepción base."""

    def test_defaults(self):
        """Debe usar código desconocido y severidad media por defecto."""
        exc = AppException("boom")

        assert exc.error_code == ErrorCode.UNKNOWN_ERROR
        assert exc.severity == ErrorSeverity.MEDIUM
        assert exc.details == {}
        assert str(exc) == "UNKNOWN_ERROR: boom"

    def test_to_dict(self):
        """Debe serializar tipo, mensaje, código y detalles."""
        data = AppException("boom", details={"order_id": 101}).to_dict()

        assert data["error_type"] == "AppException"
        assert data["message"] == "boom"
        assert data["error_code"] == "UNKNOWN_ERROR"
        assert data["details"] == {"order_id": 101}
        assert "timestamp" in data


class TestSpecificExceptions:
    """Tests para las excepciones específicas."""

    def test_configuration_exception(self):
        """Debe registrar la configuración problemática."""
        exc = ConfigurationException("Invalid settings: LOG_LEVEL", setting="LOG_LEVEL")

        assert exc.error_code == ErrorCode.CONFIGURATION_ERROR
        assert exc.severity == ErrorSeverity.HIGH
        assert exc.details["setting"] == "LOG_LEVEL"

    def test_unsupported_payment_method(self):
        """Debe construir el mensaje y el código del método de pago."""
        exc = UnsupportedMethodException("bitcoin", "payment", available=["credit_card", "paypal"])

        assert str(exc) == "UNSUPPORTED_PAYMENT_METHOD: Unsupported payment method: bitcoin"
        assert exc.details == {"method": "bitcoin", "kind": "payment", "available": ["credit_card", "paypal"]}

    def test_unsupported_shipping_method(self):
        """Debe usar el código de envío para kind='shipping'."""
        exc = UnsupportedMethodException("drone", "shipping")

        assert exc.error_code == ErrorCode.UNSUPPORTED_SHIPPING_METHOD
        assert exc.details["available"] == []


class TestLogError:
    """Tests para log_error."""

    def test_logs_app_exception_with_code(self, caplog):
        """Debe loggear el código y el mensaje de una AppException."""
        with caplog.at_level(logging.ERROR, logger="solid_orders.utils.error_handler"):
            log_error(UnsupportedMethodException("drone", "shipping"))

        assert "UNSUPPORTED_SHIPPING_METHOD: Unsupported shipping method: drone" in caplog.text
        assert caplog.records[0].error_code == "UNSUPPORTED_SHIPPING_METHOD"

    def test_logs_plain_exception(self, caplog):
        """Debe loggear excepciones estándar como no manejadas."""
        with caplog.at_level(logging.WARNING, logger="solid_orders.utils.error_handler"):
            log_error(ValueError("bad"), context={"step": "payment"}, level=logging.WARNING)

        assert "Unhandled exception: ValueError: bad" in caplog.text
        assert caplog.records[0].step == "payment"
