from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from domain.journal.errors import MalformedPayloadError

DEFAULT_POSTER_URL = "https://placehold.co/400x600/1a1a1a/666666?text=No+Poster"
DEFAULT_RATING = 3
MIN_RATING = 1
MAX_RATING = 5

# Fields a user may edit; `id` is assigned once and never changes.
EDITABLE_FIELDS = (
    "title",
    "director",
    "year",
    "country",
    "rating",
    "image",
    "review",
    "tags",
    "date_watched",
)

TagsInput = Union[str, Iterable[Any], None]


def parse_tags(raw: TagsInput) -> tuple[str, ...]:
    """Normalize tags from a comma separated string (or a list) into a tuple.

    "Romance,  Visuals, " -> ("Romance", "Visuals")
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        parts: Iterable[Any] = raw.split(",")
    else:
        parts = raw
    return tuple(t for t in (str(p).strip() for p in parts) if t)


def clamp_rating(raw: Any) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_RATING
    return max(MIN_RATING, min(MAX_RATING, value))


def _text(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


@dataclass(frozen=True)
class MovieDraft:
    """Raw values submitted by the entry editor (before normalization)."""

    title: str
    director: str
    year: Union[str, int]
    country: str
    review: str
    rating: int = DEFAULT_RATING
    image: Optional[str] = None
    tags: TagsInput = None
    date_watched: Optional[str] = None


@dataclass(frozen=True)
class MovieEntry:
    """One journal entry for a watched film."""

    id: int
    title: str
    director: str
    year: str
    country: str
    rating: int
    image: str
    review: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    date_watched: str = ""

    @classmethod
    def from_draft(cls, draft: MovieDraft, *, entry_id: int, today: str) -> "MovieEntry":
        return cls(
            id=int(entry_id),
            title=_text(draft.title),
            director=_text(draft.director),
            year=_text(draft.year),
            country=_text(draft.country),
            rating=clamp_rating(draft.rating),
            image=_text(draft.image) or DEFAULT_POSTER_URL,
            review=_text(draft.review),
            tags=parse_tags(draft.tags),
            date_watched=_text(draft.date_watched) or today,
        )

    def with_changes(self, changes: Mapping[str, Any], *, today: str) -> "MovieEntry":
        """Return a copy with only the given editable fields replaced."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"not editable: {sorted(unknown)}")
        values = {name: getattr(self, name) for name in EDITABLE_FIELDS}
        values.update(changes)
        draft = MovieDraft(**values)
        return MovieEntry.from_draft(draft, entry_id=self.id, today=today)

    def to_dict(self) -> dict[str, Any]:
        """Wire/storage shape (camelCase keys, tags as a list)."""
        return {
            "id": self.id,
            "title": self.title,
            "director": self.director,
            "year": self.year,
            "country": self.country,
            "rating": self.rating,
            "image": self.image,
            "review": self.review,
            "tags": list(self.tags),
            "dateWatched": self.date_watched,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], *, today: str = "") -> "MovieEntry":
        if not isinstance(raw, Mapping):
            raise MalformedPayloadError(f"movie record must be an object, got {type(raw).__name__}")
        try:
            entry_id = int(raw["id"])
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise MalformedPayloadError(f"movie record has no valid id: {raw.get('id')!r}") from exc
        title = _text(raw.get("title"))
        if not title:
            raise MalformedPayloadError(f"movie record {entry_id} has no title")
        draft = MovieDraft(
            title=title,
            director=raw.get("director") or "",
            year=raw.get("year") or "",
            country=raw.get("country") or "",
            review=raw.get("review") or "",
            rating=raw.get("rating", DEFAULT_RATING),
            image=raw.get("image"),
            tags=raw.get("tags"),
            date_watched=raw.get("dateWatched") or raw.get("date_watched"),
        )
        return cls.from_draft(draft, entry_id=entry_id, today=today)
