import json
import sys
import tempfile
import unittest
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from domain.journal import MovieDraft, MovieEntry
from infrastructure.persistence.local import (
    CLOUD_URL_KEY,
    MOVIES_KEY,
    VISITED_KEY,
    InMemoryJournalStore,
    JsonFileJournalStore,
)


def _entry(entry_id: int, title: str) -> MovieEntry:
    draft = MovieDraft(title=title, director="D", year="2001", country="C", review="r", tags="a, b")
    return MovieEntry.from_draft(draft, entry_id=entry_id, today="2024-05-01")


class TestInMemoryJournalStore(unittest.TestCase):
    def test_defaults(self) -> None:
        store = InMemoryJournalStore()
        self.assertEqual(store.load_movies(), [])
        self.assertEqual(store.get_cloud_url(), "")
        self.assertFalse(store.has_visited())

    def test_reads_string_encoded_movie_list(self) -> None:
        raw = json.dumps([_entry(1, "A").to_dict()])
        store = InMemoryJournalStore({MOVIES_KEY: raw, VISITED_KEY: "true"})
        self.assertEqual([m.title for m in store.load_movies()], ["A"])
        self.assertTrue(store.has_visited())


class TestJsonFileJournalStore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "store.json"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_file_is_empty_store(self) -> None:
        store = JsonFileJournalStore(self.path)
        self.assertEqual(store.load_movies(), [])
        self.assertFalse(self.path.exists())

    def test_values_survive_reopen(self) -> None:
        store = JsonFileJournalStore(self.path)
        store.save_movies([_entry(2, "B"), _entry(1, "A")])
        store.set_cloud_url("https://example.test/exec")
        store.mark_visited()

        reopened = JsonFileJournalStore(self.path)
        self.assertEqual([m.id for m in reopened.load_movies()], [2, 1])
        self.assertEqual(reopened.load_movies()[0].tags, ("a", "b"))
        self.assertEqual(reopened.get_cloud_url(), "https://example.test/exec")
        self.assertTrue(reopened.has_visited())

        on_disk = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(set(on_disk), {MOVIES_KEY, CLOUD_URL_KEY, VISITED_KEY})
        self.assertEqual(on_disk[MOVIES_KEY][0]["dateWatched"], "2024-05-01")

    def test_corrupt_file_is_not_swallowed(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2", encoding="utf-8")
        with self.assertRaises(ValueError):
            JsonFileJournalStore(self.path)
