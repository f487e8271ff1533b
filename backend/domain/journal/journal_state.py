from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domain.journal.movie_entry import MovieEntry


class SyncStatus(str, Enum):
    IDLE = "idle"
    SYNCING = "syncing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class JournalState:
    """Everything the journal UI renders from.

    `movies` is ordered newest-created first. An empty `cloud_url` means the
    remote mirror is not configured.
    """

    movies: tuple[MovieEntry, ...] = ()
    cloud_url: str = ""
    visited: bool = False
    sync_status: SyncStatus = SyncStatus.IDLE

    @property
    def view(self) -> str:
        return "app" if self.visited else "welcome"
