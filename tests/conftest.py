"""Fixtures compartidos para los tests de SOLID Orders."""

import logging
from decimal import Decimal

import pytest

from solid_orders.core.config import Settings, get_settings
from solid_orders.domain.models import Order


@pytest.fixture(autouse=True)
def isolated_settings_and_logging(monkeypatch):
    """Aísla cada test de variables de entorno, caché de settings y handlers de logging."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield

    for handler in root_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)
    get_settings.cache_clear()


@pytest.fixture
def sample_order():
    """Orden de ejemplo: 101, Ali, tres artículos, total 1200."""
    return Order(101, "Ali", ["Laptop", "Mouse", "Keyboard"], Decimal("1200"))
