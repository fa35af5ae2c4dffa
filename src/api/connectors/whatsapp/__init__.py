"""Conector WhatsApp — adapter de borda para a Graph API.

Responsabilidades:
- Provider de envio (texto e template) com retry único em 401
- Parsing de erros da Graph API
- Logging sem PII
"""

from .meta_errors import WhatsAppApiError, is_auth_error, parse_meta_error
from .provider import WhatsAppProvider

__all__ = [
    "WhatsAppApiError",
    "WhatsAppProvider",
    "is_auth_error",
    "parse_meta_error",
]
