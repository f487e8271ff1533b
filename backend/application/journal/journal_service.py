from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from datetime import date
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence

from application.ports.cloud_sync_port import CloudSyncError, CloudSyncPort
from application.ports.journal_store_port import JournalStorePort
from domain.journal import (
    EntryNotFoundError,
    JournalState,
    MalformedPayloadError,
    MovieDraft,
    MovieEntry,
    SyncStatus,
)
from domain.journal.collection import (
    add_entry,
    find_entry,
    remove_entry,
    replace_movies,
    search_entries,
    update_entry,
)
from domain.journal.payload import parse_collection_payload
from infrastructure.utils import EventLogger, redact_url

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _today() -> str:
    return date.today().isoformat()


def _sync_events(op: str, url: str) -> EventLogger:
    return EventLogger(logger, "[journal_sync]", base_fields={"op": op, "url": redact_url(url)})


class JournalService:
    """Application-layer orchestration of the movie journal.

    Holds the current `JournalState`, applies the pure collection operations,
    persists every mutation through the store and mirrors the full list to the
    remote endpoint.

    Sync model (last writer wins, no conflict resolution):
    - pull replaces the local list wholesale; on failure local data is kept.
    - push writes the store first, then sends the list in a background task.
      The endpoint gives no delivery confirmation, so callers only ever see
      the outcome through `sync_status`.
    - concurrent pushes/pulls are not ordered, coalesced or retried.
    """

    def __init__(
        self,
        *,
        store: JournalStorePort,
        sync_client: CloudSyncPort,
        status_reset_s: float = 2.0,
        default_cloud_url: str = "",
        clock_ms: Callable[[], int] = _now_ms,
        today: Callable[[], str] = _today,
    ) -> None:
        self._store = store
        self._sync = sync_client
        self._status_reset_s = max(0.0, float(status_reset_s))
        self._clock_ms = clock_ms
        self._today = today
        self._tasks: set[asyncio.Task] = set()
        # Bumped on every status transition; a pending reset only applies to its own transition.
        self._status_seq = 0
        self._state = JournalState(
            movies=tuple(store.load_movies()),
            cloud_url=(store.get_cloud_url() or default_cloud_url or "").strip(),
            visited=store.has_visited(),
        )

    # ----- read side

    @property
    def state(self) -> JournalState:
        return self._state

    @property
    def movies(self) -> tuple[MovieEntry, ...]:
        return self._state.movies

    @property
    def sync_status(self) -> SyncStatus:
        return self._state.sync_status

    def get(self, entry_id: int) -> MovieEntry:
        entry = find_entry(self._state, entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def search(self, term: Optional[str]) -> list[MovieEntry]:
        return search_entries(self._state.movies, term)

    # ----- CRUD

    async def add(self, draft: MovieDraft) -> MovieEntry:
        state, entry = add_entry(self._state, draft, now_ms=self._clock_ms(), today=self._today())
        self._state = state
        await self.push(state.movies)
        return entry

    async def update(self, entry_id: int, changes: Mapping[str, Any]) -> MovieEntry:
        state, entry = update_entry(self._state, entry_id, changes, today=self._today())
        self._state = state
        await self.push(state.movies)
        return entry

    async def remove(self, entry_id: int, *, confirmed: bool) -> bool:
        state, removed = remove_entry(self._state, entry_id, confirmed=confirmed)
        if not removed:
            return False
        self._state = state
        await self.push(state.movies)
        return True

    # ----- session / settings

    async def enter(self) -> JournalState:
        """Leave the welcome screen (remembered across restarts) and pull once."""
        self._store.mark_visited()
        self._state = replace(self._state, visited=True)
        if self._state.cloud_url:
            self.schedule_pull()
        return self._state

    async def set_cloud_url(self, url: str) -> JournalState:
        url = (url or "").strip()
        self._store.set_cloud_url(url)
        self._state = replace(self._state, cloud_url=url)
        self.schedule_pull(url)
        return self._state

    # ----- sync

    async def pull(self, url: Optional[str] = None) -> SyncStatus:
        """Replace the local collection with the remote one.

        No-op when no endpoint is configured. Failure leaves local data untouched;
        every attempt ends in `success` or `error` (and its scheduled reset).
        """
        url = (self._state.cloud_url if url is None else url).strip()
        if not url:
            return self._state.sync_status

        events = _sync_events("pull", url)
        self._transition(SyncStatus.SYNCING)
        status = SyncStatus.ERROR
        try:
            payload = await self._sync.fetch_collection(url)
            movies = parse_collection_payload(
                payload,
                today=self._today(),
                on_skip=lambda index, exc: events.warning("record_skipped", index=index, reason=str(exc)),
            )
            state = replace_movies(self._state, movies)
            self._store.save_movies(state.movies)
            self._state = replace(self._state, movies=state.movies)
            status = SyncStatus.SUCCESS
            events.info("applied", count=len(movies))
        except (CloudSyncError, MalformedPayloadError):
            events.exception("failed")
        except Exception:
            events.exception("failed_unexpected")
        self._transition(status)
        return status

    def schedule_pull(self, url: Optional[str] = None) -> None:
        self._spawn(self.pull(url))

    async def push(self, movies: Sequence[MovieEntry]) -> None:
        """Persist `movies` locally, then mirror them to the endpoint if one is set.

        The local store is the authoritative copy regardless of the push outcome.
        """
        movies = tuple(movies)
        self._store.save_movies(movies)
        url = self._state.cloud_url
        if not url:
            return
        self._transition(SyncStatus.SYNCING)
        self._spawn(self._push_task(url, movies))

    async def _push_task(self, url: str, movies: tuple[MovieEntry, ...]) -> None:
        events = _sync_events("push", url)
        status = SyncStatus.ERROR
        try:
            await self._sync.push_collection(url, movies)
            status = SyncStatus.SUCCESS
        except CloudSyncError:
            events.exception("failed", count=len(movies))
        except Exception:
            events.exception("failed_unexpected", count=len(movies))
        self._transition(status)

    # ----- status lifecycle

    def _transition(self, status: SyncStatus) -> None:
        self._status_seq += 1
        self._state = replace(self._state, sync_status=status)
        if status in (SyncStatus.SUCCESS, SyncStatus.ERROR):
            self._spawn(self._reset_status_later(self._status_seq))

    async def _reset_status_later(self, seq: int) -> None:
        await asyncio.sleep(self._status_reset_s)
        if seq == self._status_seq:
            self._status_seq += 1
            self._state = replace(self._state, sync_status=SyncStatus.IDLE)

    # ----- background tasks

    def _spawn(self, coro: Awaitable[Any]) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for every in-flight sync task (and the status resets they schedule)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        await self._sync.close()
