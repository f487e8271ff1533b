from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from domain.journal.errors import EntryNotFoundError
from domain.journal.journal_state import JournalState
from domain.journal.movie_entry import MovieDraft, MovieEntry

# Collection operations are pure: they take a state and return a new one.
# Persisting and mirroring the result is the caller's job.


def _index_of(movies: tuple[MovieEntry, ...], entry_id: int) -> int:
    for idx, movie in enumerate(movies):
        if movie.id == entry_id:
            return idx
    raise EntryNotFoundError(entry_id)


def next_entry_id(movies: Iterable[MovieEntry], now_ms: int) -> int:
    """Creation timestamp in ms, bumped past any id already taken."""
    taken = {m.id for m in movies}
    candidate = int(now_ms)
    while candidate in taken:
        candidate += 1
    return candidate


def find_entry(state: JournalState, entry_id: int) -> Optional[MovieEntry]:
    for movie in state.movies:
        if movie.id == entry_id:
            return movie
    return None


def add_entry(
    state: JournalState,
    draft: MovieDraft,
    *,
    now_ms: int,
    today: str,
) -> tuple[JournalState, MovieEntry]:
    entry = MovieEntry.from_draft(draft, entry_id=next_entry_id(state.movies, now_ms), today=today)
    return replace(state, movies=(entry, *state.movies)), entry


def update_entry(
    state: JournalState,
    entry_id: int,
    changes: Mapping[str, Any],
    *,
    today: str,
) -> tuple[JournalState, MovieEntry]:
    idx = _index_of(state.movies, entry_id)
    updated = state.movies[idx].with_changes(changes, today=today)
    movies = state.movies[:idx] + (updated,) + state.movies[idx + 1 :]
    return replace(state, movies=movies), updated


def remove_entry(
    state: JournalState,
    entry_id: int,
    *,
    confirmed: bool,
) -> tuple[JournalState, bool]:
    """Drop one entry. Deletion is irreversible, so it needs `confirmed=True`."""
    _index_of(state.movies, entry_id)
    if not confirmed:
        return state, False
    movies = tuple(m for m in state.movies if m.id != entry_id)
    return replace(state, movies=movies), True


def search_entries(movies: Iterable[MovieEntry], term: Optional[str]) -> list[MovieEntry]:
    q = (term or "").strip().lower()
    if not q:
        return list(movies)
    return [
        m
        for m in movies
        if q in m.title.lower() or q in m.director.lower() or q in m.country.lower()
    ]


def replace_movies(state: JournalState, movies: Iterable[MovieEntry]) -> JournalState:
    return replace(state, movies=tuple(movies))
