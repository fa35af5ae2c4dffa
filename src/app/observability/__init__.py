"""Observabilidade — correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import correlation_scope, get_correlation_id
    from app.observability import record_latency, record_send_result
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_auth_retry,
    record_latency,
    record_send_result,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "record_auth_retry",
    "record_latency",
    "record_send_result",
    "reset_correlation_id",
    "set_correlation_id",
]
