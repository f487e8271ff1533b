from __future__ import annotations


class JournalError(Exception):
    """Base class for movie journal domain errors."""


class EntryNotFoundError(JournalError):
    def __init__(self, entry_id: int) -> None:
        super().__init__(f"movie entry not found: {entry_id}")
        self.entry_id = entry_id


class MalformedPayloadError(JournalError, ValueError):
    """A remote body or stored record does not have the expected shape."""
