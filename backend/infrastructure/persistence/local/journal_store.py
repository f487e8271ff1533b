from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from application.ports.journal_store_port import JournalStorePort
from domain.journal import MovieEntry
from domain.journal.payload import parse_collection
from infrastructure.config.settings import CINELOG_STORE_PATH

logger = logging.getLogger(__name__)

MOVIES_KEY = "cinelog_movies"
CLOUD_URL_KEY = "cinelog_cloud_url"
VISITED_KEY = "cinelog_visited"


class InMemoryJournalStore(JournalStorePort):
    """Key-value journal store kept in a dict (tests / ephemeral runs)."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = dict(initial or {})

    def _get(self, key: str) -> Any:
        return self._data.get(key)

    def _set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def load_movies(self) -> List[MovieEntry]:
        raw = self._get(MOVIES_KEY)
        if raw is None:
            return []
        # Older dumps stored the list as a JSON string (browser storage style).
        if isinstance(raw, str):
            raw = json.loads(raw)
        return parse_collection(
            raw,
            on_skip=lambda index, exc: logger.warning("stored movie record skipped index=%d reason=%s", index, exc),
        )

    def save_movies(self, movies: Sequence[MovieEntry]) -> None:
        self._set(MOVIES_KEY, [m.to_dict() for m in movies])

    def get_cloud_url(self) -> str:
        return str(self._get(CLOUD_URL_KEY) or "")

    def set_cloud_url(self, url: str) -> None:
        self._set(CLOUD_URL_KEY, str(url or ""))

    def has_visited(self) -> bool:
        return str(self._get(VISITED_KEY) or "").lower() == "true"

    def mark_visited(self) -> None:
        self._set(VISITED_KEY, "true")


class JsonFileJournalStore(InMemoryJournalStore):
    """Journal store persisted as a single JSON document on disk.

    The file is read once at construction and rewritten on every write.
    Read/write/decode errors are not caught.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path if path is not None else CINELOG_STORE_PATH)
        initial: Dict[str, Any] = {}
        if self._path.exists():
            loaded = json.loads(self._path.read_text(encoding="utf-8") or "{}")
            if not isinstance(loaded, dict):
                raise ValueError(f"journal store {self._path} must hold a JSON object")
            initial = loaded
        super().__init__(initial)

    @property
    def path(self) -> Path:
        return self._path

    def _set(self, key: str, value: Any) -> None:
        super()._set(key, value)
        self._flush()

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)
        logger.debug("journal store written path=%s", self._path)
