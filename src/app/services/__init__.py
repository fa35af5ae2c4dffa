"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/ e api/connectors/.

O MessageService depende de api.connectors; importe-o diretamente de
app.services.message_service.
"""

from app.services.token_manager import TokenManager

__all__ = [
    "TokenManager",
]
