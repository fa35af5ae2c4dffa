"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="cofounder_messaging")

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Tokens e telefones são redigidos antes da emissão.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, RedactionFilter, redact
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "RedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "redact",
]
