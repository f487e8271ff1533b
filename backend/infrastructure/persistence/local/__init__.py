from .journal_store import (
    CLOUD_URL_KEY,
    MOVIES_KEY,
    VISITED_KEY,
    InMemoryJournalStore,
    JsonFileJournalStore,
)

__all__ = [
    "CLOUD_URL_KEY",
    "MOVIES_KEY",
    "VISITED_KEY",
    "InMemoryJournalStore",
    "JsonFileJournalStore",
]
