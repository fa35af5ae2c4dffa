"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - firestore_message_store: Histórico de mensagens no Firestore (tempo real)
    - memory_message_store: Store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_message_store import FirestoreMessageStore
from app.infra.stores.memory_message_store import MemoryMessageStore

__all__ = [
    "FirestoreMessageStore",
    "MemoryMessageStore",
]
