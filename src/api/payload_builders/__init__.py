"""Payload builders por provider — construção de payloads de fio.

Estrutura:
- whatsapp/: Graph API (texto e template)
- line/: Messaging API (texto e buttons template)
- telegram/: Bot API sendMessage (HTML)

Builders são puros: recebem MessageContent/MessageOptions e devolvem dict.
"""

__all__: list[str] = []
