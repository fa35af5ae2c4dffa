"""API — camada de borda e adapters de provedores de mensageria.

Responsabilidades:
- Expor o endpoint interno de dispatch e o webhook do Telegram
- Construir payloads para APIs externas (Graph API, LINE, Bot API)
- Traduzir respostas e erros externos em MessageResponse

Subpastas:
- connectors/: providers HTTP por plataforma, factory e ApiProvider
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (dispatch, webhook, health)

NÃO PODE conter: persistência, cache de tokens, renderização de conteúdo.
"""
