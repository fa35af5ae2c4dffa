"""App — orquestração, serviços e infraestrutura da mensageria.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- services/: token manager, content factories, MessageService
- infra/: implementações concretas de IO (message stores)
- protocols/: contratos/interfaces e modelos canônicos
- observability/: correlation_id e métricas via logs estruturados
- constants/: enums de mensageria

Padrão: app executa; api adapta; utils apoia.
"""
