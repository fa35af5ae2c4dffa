"""Modelos canônicos de mensageria.

Contratos imutáveis trocados entre factories, providers, stores e rotas.
Os nomes de campo seguem snake_case; `to_dict()`/`to_record()` fazem a
ponte para os formatos de fio (camelCase) e de persistência (snake_case).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any

from app.constants.messaging import (
    MessageDirection,
    MessageStatus,
    MessageType,
    ProviderType,
)


@dataclass(frozen=True, slots=True)
class MessageMetadata:
    """Metadados de template associados a um conteúdo."""

    template_name: str
    parameters: tuple[str, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "templateName": self.template_name,
            "parameters": list(self.parameters),
        }


@dataclass(frozen=True, slots=True)
class MessageContent:
    """Conteúdo produzido por uma content factory. Nunca é mutado."""

    body: str
    type: MessageType
    metadata: MessageMetadata | None = None


@dataclass(frozen=True, slots=True)
class TemplateData:
    """Dados de negociação de template (nome, idioma, componentes)."""

    name: str
    language_code: str
    components: tuple[dict[str, Any], ...] = ()

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "language": {"code": self.language_code},
        }
        if self.components:
            payload["components"] = [dict(c) for c in self.components]
        return payload


@dataclass(frozen=True, slots=True)
class MessageOptions:
    """Dicas de transporte. Cada provider define seus próprios defaults."""

    language: str | None = None
    preview_url: bool | None = None
    template_data: TemplateData | None = None


@dataclass(frozen=True, slots=True)
class MessageResponse:
    """Envelope de resultado de um dispatch (sucesso ou falha)."""

    success: bool
    status_code: int
    message_id: str | None = None
    error: str | None = None
    user_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Formato de fio: {success, messageId?, error?, statusCode}."""
        data: dict[str, Any] = {
            "success": self.success,
            "statusCode": self.status_code,
        }
        if self.message_id is not None:
            data["messageId"] = self.message_id
        if self.error is not None:
            data["error"] = self.error
        if self.user_message is not None:
            data["userMessage"] = self.user_message
        return data


@dataclass(frozen=True, slots=True)
class Message:
    """Mensagem persistida (inbound ou outbound).

    Transições de status são append-only: uma nova linha é gravada
    para cada evento; não há rebaixamento in-place.
    """

    id: str
    platform: ProviderType
    direction: MessageDirection
    status: MessageStatus
    platform_chat_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    platform_message_id: str | None = None
    platform_user_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> dict[str, Any]:
        """Linha persistida (colunas snake_case da tabela `messages`)."""
        return {
            "id": self.id,
            "platform": str(self.platform),
            "direction": str(self.direction),
            "status": str(self.status),
            "platform_message_id": self.platform_message_id,
            "platform_chat_id": self.platform_chat_id,
            "platform_user_id": self.platform_user_id,
            "content": self.content,
            "metadata": self.metadata,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_record(cls, row: dict[str, Any]) -> Message:
        """Reconstrói a mensagem a partir de uma linha persistida."""
        return cls(
            id=str(row["id"]),
            platform=ProviderType(row["platform"]),
            direction=MessageDirection(row["direction"]),
            status=MessageStatus(row["status"]),
            platform_message_id=row.get("platform_message_id"),
            platform_chat_id=str(row["platform_chat_id"]),
            platform_user_id=row.get("platform_user_id"),
            content=row.get("content", ""),
            metadata=dict(row.get("metadata") or {}),
            created_at=_parse_datetime(row["created_at"]),
            updated_at=_parse_datetime(row.get("updated_at", row["created_at"])),
        )


def _parse_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    parsed = datetime.fromisoformat(value)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class OrderNotificationParams:
    """Dados de domínio de um pedido recém-criado."""

    order_number: str
    customer_name: str
    items: tuple[str, ...]
    total: float
    delivery_date: date | None = None
    notes: str | None = None


@dataclass(frozen=True, slots=True)
class DeliveryUpdateParams:
    """Dados de atualização de entrega (nenhuma factory implementa ainda)."""

    order_number: str
    status: str = ""
    eta: date | None = None
