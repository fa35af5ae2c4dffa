"""Factories de clientes externos — Firestore e HTTP."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpClientConfig
from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton) para o projeto configurado."""
    from google.cloud import firestore

    project_id = get_firestore_settings().resolve_project(get_base_settings().gcp_project)
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client


@lru_cache(maxsize=1)
def create_http_client() -> HttpClient:
    """Cliente HTTP compartilhado (cada provider aplica seu timeout)."""
    return HttpClient(HttpClientConfig())
