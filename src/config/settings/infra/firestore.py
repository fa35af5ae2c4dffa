"""Settings do Firestore (backend do MessageStore).

Usado apenas quando MESSAGE_STORE_BACKEND=firestore.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (vazio = usa GCP_PROJECT)
        collection_messages: Collection da tabela de mensagens
        collection_health: Collection do documento lido pelo /ready
    """

    project_id: str = ""
    collection_messages: str = "messages"
    collection_health: str = "_health"

    def resolve_project(self, gcp_project: str) -> str | None:
        """Projeto efetivo; None deixa o client inferir do ambiente."""
        return self.project_id or gcp_project or None

    def validate(self, gcp_project: str) -> list[str]:
        errors: list[str] = []
        if not self.resolve_project(gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")
        if not self.collection_messages:
            errors.append("FIRESTORE_COLLECTION_MESSAGES não pode ser vazio")
        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        collection_messages=os.getenv("FIRESTORE_COLLECTION_MESSAGES", "messages"),
        collection_health=os.getenv("FIRESTORE_COLLECTION_HEALTH", "_health"),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
