"""Cliente HTTP base para os providers de mensageria.

Todo POST tem timeout explícito. Timeouts viram MessagingTimeoutError
(504) e falhas de conexão viram UpstreamError (502). Respostas HTTP são
devolvidas ao chamador, que faz a classificação específica do provider.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import MessagingTimeoutError, UpstreamError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `max_retries` cobre apenas falhas transitórias (429, 5xx, rede).
    O retry de autenticação (401) é responsabilidade do provider.
    """

    timeout_seconds: float = 10.0
    max_retries: int = 0
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 5.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP assíncrono simples para chamadas externas.

    Args:
        config: Configuração de timeout/retry
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    def with_timeout(self, timeout_seconds: float) -> HttpClient:
        """Cópia do cliente com outro timeout (mesmo transport)."""
        config = HttpClientConfig(
            timeout_seconds=timeout_seconds,
            max_retries=self._config.max_retries,
            backoff_base_seconds=self._config.backoff_base_seconds,
            backoff_max_seconds=self._config.backoff_max_seconds,
            default_headers=dict(self._config.default_headers),
            verify_ssl=self._config.verify_ssl,
        )
        return HttpClient(config, transport=self._transport)

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        attempt = 0
        while True:
            try:
                async with httpx.AsyncClient(
                    verify=self._config.verify_ssl,
                    transport=self._transport,
                ) as client:
                    response = await client.post(
                        url,
                        json=json,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                    )
            except httpx.TimeoutException as exc:
                if attempt >= self._config.max_retries:
                    raise MessagingTimeoutError(
                        f"Timeout após {self._config.timeout_seconds}s"
                    ) from exc
            except httpx.TransportError as exc:
                if attempt >= self._config.max_retries:
                    raise UpstreamError(
                        f"Falha de conexão: {type(exc).__name__}", status_code=502
                    ) from exc
            else:
                if (
                    response.status_code not in RETRYABLE_STATUS
                    or attempt >= self._config.max_retries
                ):
                    return response

            await _backoff_sleep(
                attempt,
                self._config.backoff_base_seconds,
                self._config.backoff_max_seconds,
            )
            attempt += 1


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff, "attempt": attempt})
    await asyncio.sleep(backoff)


def response_json(response: httpx.Response) -> dict[str, Any]:
    """JSON do corpo ou dict vazio se o corpo não for um objeto JSON."""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
