from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from domain.journal.errors import MalformedPayloadError
from domain.journal.movie_entry import MovieEntry

SYNC_ALL_ACTION = "sync_all"
COLLECTION_KEY = "data"

# Called with (position in the list, decode error) for each record that is dropped.
SkipHandler = Callable[[int, MalformedPayloadError], None]


def build_push_payload(movies: Iterable[MovieEntry]) -> dict[str, Any]:
    """Request body for a full-list push: {"action": "sync_all", "data": [...]}."""
    return {"action": SYNC_ALL_ACTION, COLLECTION_KEY: [m.to_dict() for m in movies]}


def parse_collection(
    records: Any,
    *,
    today: str = "",
    on_skip: Optional[SkipHandler] = None,
) -> list[MovieEntry]:
    """Decode a list of wire records.

    Records that cannot be decoded (blank spreadsheet rows, missing id/title)
    are dropped and reported to `on_skip`; a repeated id keeps the first record.
    Only a non-list raises MalformedPayloadError.
    """
    if not isinstance(records, list):
        raise MalformedPayloadError(f"expected a list of movies, got {type(records).__name__}")
    out: list[MovieEntry] = []
    seen: set[int] = set()
    for index, raw in enumerate(records):
        try:
            entry = MovieEntry.from_dict(raw, today=today)
        except MalformedPayloadError as exc:
            if on_skip is not None:
                on_skip(index, exc)
            continue
        if entry.id in seen:
            continue
        seen.add(entry.id)
        out.append(entry)
    return out


def parse_collection_payload(
    payload: Any,
    *,
    today: str = "",
    on_skip: Optional[SkipHandler] = None,
) -> list[MovieEntry]:
    """Decode a pull response body of the form {"data": [...]}.

    A non-object body, a missing key or a non-list value raises
    MalformedPayloadError so the caller can leave local data untouched.
    """
    if not isinstance(payload, dict):
        raise MalformedPayloadError(f"expected an object body, got {type(payload).__name__}")
    if COLLECTION_KEY not in payload:
        raise MalformedPayloadError(f"response has no {COLLECTION_KEY!r} key")
    return parse_collection(payload[COLLECTION_KEY], today=today, on_skip=on_skip)
