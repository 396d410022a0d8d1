"""Configuración centralizada de logging."""
import logging

import structlog

from .config import get_settings


def configure_logging() -> None:
    """Configura structlog y el nivel del logger ``camoucfg``.

    Se invoca al importar el paquete solo si el proceso anfitrión todavía no
    configuró structlog.
    """
    # Logging estructurado sobre la integración stdlib de structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("camoucfg").setLevel(get_settings().log_level)


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """Obtiene un logger configurado con el nombre especificado."""
    return structlog.get_logger(f"camoucfg.{name}")
