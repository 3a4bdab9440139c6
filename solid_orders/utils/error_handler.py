"""
Sistema de manejo de errores personalizado.

Este módulo define las excepciones personalizadas de la aplicación
y proporciona utilidades para manejo consistente de errores.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados para la aplicación.
    """

    # Errores generales
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Errores de selección de estrategia
    UNSUPPORTED_PAYMENT_METHOD = "UNSUPPORTED_PAYMENT_METHOD"
    UNSUPPORTED_SHIPPING_METHOD = "UNSUPPORTED_SHIPPING_METHOD"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones personalizadas de la aplicación.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            severity: Severidad del error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.severity = severity
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class ConfigurationException(AppException):
    """
    Excepción para errores de configuración.
    """

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        """
        Inicializa la excepción de configuración.

        Args:
            message: Mensaje de error
            setting: Nombre de la configuración problemática
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.setting = setting
        self.details["setting"] = setting


class UnsupportedMethodException(AppException):
    """
    Excepción para métodos de pago o envío no registrados.
    """

    def __init__(self, method: str, kind: str, available: Optional[list[str]] = None, **kwargs):
        """
        Inicializa la excepción de método no soportado.

        Args:
            method: Método solicitado
            kind: "payment" o "shipping"
            available: Métodos registrados actualmente
            **kwargs: Argumentos adicionales para AppException
        """
        error_code = (
            ErrorCode.UNSUPPORTED_PAYMENT_METHOD if kind == "payment" else ErrorCode.UNSUPPORTED_SHIPPING_METHOD
        )
        super().__init__(
            message=f"Unsupported {kind} method: {method}",
            error_code=error_code,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.method = method
        self.kind = kind
        self.details.update({"method": method, "kind": kind, "available": available or []})


# === FUNCIONES DE UTILIDAD ===


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        "traceback": traceback.format_exc(),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
