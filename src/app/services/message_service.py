"""Serviço de notificações de pedido.

Escolhe a content factory do provider, renderiza o conteúdo e despacha
pelo ApiProvider do mesmo provider. Não faz retry nem fallback para
outro canal: falhas são logadas e propagadas ao chamador.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.api_provider import ApiProvider
from app.constants.messaging import DEFAULT_TEMPLATE_LANGUAGE, ProviderType
from app.protocols.models import MessageOptions, TemplateData
from app.services.content_factories import get_content_factory

if TYPE_CHECKING:
    from api.connectors.http_base import HttpClient
    from app.protocols.models import (
        MessageContent,
        MessageResponse,
        OrderNotificationParams,
    )

logger = logging.getLogger(__name__)


def build_template_options(
    provider_type: str,
    content: MessageContent,
) -> MessageOptions | None:
    """Template data {name, en_US} para todos os providers exceto Telegram."""
    if provider_type == ProviderType.TELEGRAM:
        return None
    name = content.metadata.template_name if content.metadata else ""
    return MessageOptions(
        template_data=TemplateData(name=name, language_code=DEFAULT_TEMPLATE_LANGUAGE)
    )


class MessageService:
    """Orquestra factory + dispatch para notificações de domínio.

    Args:
        api_url: URL do endpoint interno POST /api/messaging
        http_client: Cliente HTTP compartilhado pelos ApiProviders
    """

    def __init__(self, api_url: str, http_client: HttpClient | None = None) -> None:
        self._api_url = api_url
        self._http_client = http_client
        self._providers: dict[str, ApiProvider] = {}

    def _get_provider(self, provider_type: str) -> ApiProvider:
        provider = self._providers.get(provider_type)
        if provider is None:
            provider = ApiProvider(str(provider_type), self._api_url, self._http_client)
            self._providers[provider_type] = provider
        return provider

    async def send_order_notification(
        self,
        recipient: str,
        params: OrderNotificationParams,
        provider_type: str = ProviderType.WHATSAPP,
    ) -> MessageResponse:
        """Envia notificação de novo pedido.

        Raises:
            NotImplementedError: kakao
            UnsupportedProviderTypeError: provider desconhecido
        """
        try:
            factory = get_content_factory(provider_type)
            content = factory.create_order_notification(params)
            options = build_template_options(provider_type, content)
            result = await self._get_provider(provider_type).send_message(
                recipient, content, options
            )
        except Exception as exc:
            logger.error(
                "order_notification_failed",
                extra={"provider": str(provider_type), "error_type": type(exc).__name__},
            )
            raise

        logger.info(
            "order_notification_dispatched",
            extra={
                "provider": str(provider_type),
                "success": result.success,
                "status_code": result.status_code,
            },
        )
        return result
