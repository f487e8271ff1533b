from __future__ import annotations

from typing import List, Protocol, Sequence

from domain.journal import MovieEntry


class JournalStorePort(Protocol):
    """Durable key-value storage for the journal (movies, cloud url, visited flag)."""

    def load_movies(self) -> List[MovieEntry]:
        ...

    def save_movies(self, movies: Sequence[MovieEntry]) -> None:
        ...

    def get_cloud_url(self) -> str:
        ...

    def set_cloud_url(self, url: str) -> None:
        ...

    def has_visited(self) -> bool:
        ...

    def mark_visited(self) -> None:
        ...
