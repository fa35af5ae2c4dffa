"""Exceções compartilhadas do serviço de mensageria.

Erros de mensageria carregam `status_code` (usado no MessageResponse) e
`user_message` (texto amigável, separado do diagnóstico em `error`).
"""

from __future__ import annotations

DEFAULT_USER_MESSAGE = "We could not send your message. Please try again later."


class MessagingError(Exception):
    """Base para falhas de envio de mensagens."""

    status_code: int = 500
    user_message: str = DEFAULT_USER_MESSAGE

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if user_message is not None:
            self.user_message = user_message


class InvalidRecipientError(MessagingError):
    """Telefone ou chat id mal-formado."""

    status_code = 400
    user_message = "The recipient number is not valid."


class InvalidTemplateError(MessagingError):
    """Mensagem de template sem dados obrigatórios (nome, idioma)."""

    status_code = 400


class UnsupportedProviderError(MessagingError):
    """Provider sem estratégia de token conhecida."""

    status_code = 400

    def __init__(self, provider: str) -> None:
        super().__init__(f"Provider não suportado: {provider}")
        self.provider = provider


class UnsupportedProviderTypeError(MessagingError):
    """Tipo de provider fora do conjunto fechado suportado."""

    status_code = 400

    def __init__(self, provider_type: str) -> None:
        super().__init__(f"Tipo de provider não suportado: {provider_type}")
        self.provider_type = provider_type


class UnsupportedMessageTypeError(MessagingError):
    """Tipo de conteúdo não suportado por um provider."""

    status_code = 400

    def __init__(self, provider: str, message_type: str) -> None:
        super().__init__(
            f"Tipo de mensagem não suportado para {provider}: {message_type}"
        )
        self.provider = provider
        self.message_type = message_type


class AuthExpiredError(MessagingError):
    """Token rejeitado pelo provider (401)."""

    status_code = 401


class UpstreamError(MessagingError):
    """Resposta não-2xx de uma API de terceiros."""

    status_code = 502


class MessagingTimeoutError(MessagingError, TimeoutError):
    """Chamada de rede excedeu o timeout do provider."""

    status_code = 504
    user_message = "The messaging service took too long to respond."


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class MessageStoreError(InfrastructureError):
    """Falha ao persistir ou consultar mensagens."""
