"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DEFAULT_USER_MESSAGE,
    AuthExpiredError,
    InfrastructureError,
    InvalidRecipientError,
    InvalidTemplateError,
    MessageStoreError,
    MessagingError,
    MessagingTimeoutError,
    UnsupportedMessageTypeError,
    UnsupportedProviderError,
    UnsupportedProviderTypeError,
    UpstreamError,
)

__all__ = [
    "DEFAULT_USER_MESSAGE",
    "AuthExpiredError",
    "InfrastructureError",
    "InvalidRecipientError",
    "InvalidTemplateError",
    "MessageStoreError",
    "MessagingError",
    "MessagingTimeoutError",
    "UnsupportedMessageTypeError",
    "UnsupportedProviderError",
    "UnsupportedProviderTypeError",
    "UpstreamError",
]
