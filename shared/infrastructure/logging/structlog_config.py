"""
Configuração de logging estruturado com structlog.

Os logs vão para stderr: o stdout fica reservado para o transporte stdio
das tools MCP.
"""

import logging
import sys
from typing import Optional

import structlog

from shared.infrastructure.config.settings import get_settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configura logging estruturado para a aplicação.

    Args:
        log_level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Quando omitido, usa ``Settings.log_level``.
    """
    log_level = (log_level or get_settings().log_level).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
            if log_level == "DEBUG"
            else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Obtém um logger configurado.

    Args:
        name: Nome do logger (geralmente __name__)

    Returns:
        Logger estruturado
    """
    return structlog.get_logger(name)
