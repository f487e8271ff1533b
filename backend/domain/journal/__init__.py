from domain.journal.errors import EntryNotFoundError, JournalError, MalformedPayloadError
from domain.journal.journal_state import JournalState, SyncStatus
from domain.journal.movie_entry import (
    DEFAULT_POSTER_URL,
    EDITABLE_FIELDS,
    MovieDraft,
    MovieEntry,
    parse_tags,
)

__all__ = [
    "DEFAULT_POSTER_URL",
    "EDITABLE_FIELDS",
    "EntryNotFoundError",
    "JournalError",
    "JournalState",
    "MalformedPayloadError",
    "MovieDraft",
    "MovieEntry",
    "SyncStatus",
    "parse_tags",
]
