"""Registro de métricas via structured logging.

As métricas são emitidas como logs estruturados e agregadas depois
(BigQuery, Cloud Logging, etc.).

Métricas suportadas:
- Latência: tempo de dispatch por provider/operação
- Resultado de envio: counter de sucesso/falha por provider e status HTTP
- Retry de autenticação: counter de 401 recuperados ou não

Uso:
    start = time.perf_counter()
    # ... envio ...
    record_latency("whatsapp", "send_message", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "whatsapp", "api_provider")
        operation: Nome da operação (ex: "send_message")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (o filter de logging preenche se None)
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_send_result(provider: str, success: bool, status_code: int) -> None:
    """Counter de envios por provider e resultado."""
    logger.info(
        "metric_send_result",
        extra={
            "metric_type": "send_result",
            "provider": provider,
            "success": success,
            "status_code": status_code,
        },
    )


def record_auth_retry(provider: str, recovered: bool) -> None:
    """Counter de retries após 401 (recovered=False quando o retry também falhou)."""
    logger.info(
        "metric_auth_retry",
        extra={
            "metric_type": "auth_retry",
            "provider": provider,
            "recovered": recovered,
        },
    )
