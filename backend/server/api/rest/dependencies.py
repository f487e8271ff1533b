from __future__ import annotations

import logging
from functools import lru_cache

from application.journal.journal_service import JournalService
from application.ports.cloud_sync_port import CloudSyncPort
from application.ports.journal_store_port import JournalStorePort
from config.settings import (
    CINELOG_DEFAULT_CLOUD_URL,
    CINELOG_STORE_BACKEND,
    SYNC_STATUS_RESET_S,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _build_journal_store() -> JournalStorePort:
    from infrastructure.persistence.local import InMemoryJournalStore, JsonFileJournalStore

    if CINELOG_STORE_BACKEND == "memory":
        return InMemoryJournalStore()
    if CINELOG_STORE_BACKEND != "file":
        logger.warning("unknown CINELOG_STORE_BACKEND=%s; using file store", CINELOG_STORE_BACKEND)
    return JsonFileJournalStore()


@lru_cache(maxsize=1)
def _build_sync_client() -> CloudSyncPort:
    from infrastructure.sync import SheetsSyncClient

    return SheetsSyncClient()


@lru_cache(maxsize=1)
def _build_journal_service() -> JournalService:
    return JournalService(
        store=_build_journal_store(),
        sync_client=_build_sync_client(),
        status_reset_s=SYNC_STATUS_RESET_S,
        default_cloud_url=CINELOG_DEFAULT_CLOUD_URL,
    )


def get_journal_service() -> JournalService:
    return _build_journal_service()


async def shutdown_dependencies() -> None:
    """Cancel in-flight syncs and close the HTTP session (only if ever built)."""
    if _build_journal_service.cache_info().currsize:
        await _build_journal_service().close()
    elif _build_sync_client.cache_info().currsize:
        await _build_sync_client().close()
