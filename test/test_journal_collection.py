import sys
import unittest
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from domain.journal import EntryNotFoundError, JournalState, MalformedPayloadError, MovieDraft
from domain.journal.collection import (
    add_entry,
    next_entry_id,
    remove_entry,
    search_entries,
    update_entry,
)
from domain.journal.payload import build_push_payload, parse_collection_payload

TODAY = "2024-05-01"


def _draft(title: str, director: str = "Someone", country: str = "France") -> MovieDraft:
    return MovieDraft(title=title, director=director, year="1999", country=country, review="ok")


def _state_with(*titles: str) -> JournalState:
    state = JournalState()
    for i, title in enumerate(titles):
        state, _ = add_entry(state, _draft(title), now_ms=1_000 + i, today=TODAY)
    return state


class TestCollectionOps(unittest.TestCase):
    def test_add_to_empty_collection(self) -> None:
        draft = MovieDraft(
            title="In the Mood for Love",
            director="Wong Kar-wai",
            year=2000,
            country="Hong Kong",
            rating=5,
            review="...",
            tags="Romance, Visuals",
        )
        state, entry = add_entry(JournalState(), draft, now_ms=1_700_000_000_000, today=TODAY)
        self.assertEqual(len(state.movies), 1)
        self.assertEqual(entry.id, 1_700_000_000_000)
        self.assertEqual(entry.tags, ("Romance", "Visuals"))
        self.assertEqual(state.movies[0], entry)

    def test_add_prepends(self) -> None:
        state = _state_with("A", "B")
        state2, entry = add_entry(state, _draft("C"), now_ms=5_000, today=TODAY)
        self.assertEqual(len(state2.movies), len(state.movies) + 1)
        self.assertEqual(state2.movies[0].id, entry.id)
        self.assertEqual([m.title for m in state2.movies], ["C", "B", "A"])

    def test_ids_stay_unique_within_one_millisecond(self) -> None:
        state = _state_with("A")
        taken = state.movies[0].id
        self.assertEqual(next_entry_id(state.movies, taken), taken + 1)
        state2, entry = add_entry(state, _draft("B"), now_ms=taken, today=TODAY)
        self.assertEqual(len({m.id for m in state2.movies}), 2)
        self.assertNotEqual(entry.id, taken)

    def test_update_preserves_size_id_and_position(self) -> None:
        state = _state_with("A", "B", "C")
        target = state.movies[1]
        state2, updated = update_entry(state, target.id, {"review": "changed"}, today=TODAY)
        self.assertEqual(len(state2.movies), 3)
        self.assertEqual(state2.movies[1].id, target.id)
        self.assertEqual(updated.review, "changed")
        self.assertEqual(updated.title, target.title)
        self.assertEqual(state2.movies[0], state.movies[0])
        self.assertEqual(state2.movies[2], state.movies[2])

    def test_update_unknown_id(self) -> None:
        with self.assertRaises(EntryNotFoundError):
            update_entry(_state_with("A"), 999, {"title": "x"}, today=TODAY)

    def test_remove_requires_confirmation(self) -> None:
        state = _state_with("A", "B")
        target = state.movies[0].id

        declined, removed = remove_entry(state, target, confirmed=False)
        self.assertFalse(removed)
        self.assertIs(declined, state)

        state2, removed = remove_entry(state, target, confirmed=True)
        self.assertTrue(removed)
        self.assertEqual(len(state2.movies), 1)
        self.assertNotIn(target, [m.id for m in state2.movies])

    def test_remove_unknown_id(self) -> None:
        with self.assertRaises(EntryNotFoundError):
            remove_entry(_state_with("A"), 999, confirmed=True)

    def test_search_is_case_insensitive_and_non_mutating(self) -> None:
        state = JournalState()
        state, _ = add_entry(state, _draft("Chungking Express", director="Wong Kar-wai", country="Hong Kong"), now_ms=1, today=TODAY)
        state, _ = add_entry(state, _draft("Amelie", director="Jean-Pierre Jeunet"), now_ms=2, today=TODAY)

        self.assertEqual([m.title for m in search_entries(state.movies, "wong")], ["Chungking Express"])
        self.assertEqual([m.title for m in search_entries(state.movies, "FRANCE")], ["Amelie"])
        self.assertEqual([m.title for m in search_entries(state.movies, "amel")], ["Amelie"])
        self.assertEqual(len(search_entries(state.movies, "")), 2)
        self.assertEqual(len(state.movies), 2)


class TestCollectionPayload(unittest.TestCase):
    def test_push_payload_shape(self) -> None:
        state = _state_with("A")
        payload = build_push_payload(state.movies)
        self.assertEqual(payload["action"], "sync_all")
        self.assertEqual(payload["data"][0]["title"], "A")

    def test_parse_valid_payload(self) -> None:
        movies = parse_collection_payload({"data": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]})
        self.assertEqual([m.id for m in movies], [1, 2])

    def test_parse_keeps_first_of_repeated_ids(self) -> None:
        movies = parse_collection_payload({"data": [{"id": 1, "title": "A"}, {"id": 1, "title": "B"}]})
        self.assertEqual([m.title for m in movies], ["A"])

    def test_parse_rejects_malformed_bodies(self) -> None:
        for body in (None, [], "oops", {"items": []}, {"data": {"id": 1}}):
            with self.subTest(body=body):
                with self.assertRaises(MalformedPayloadError):
                    parse_collection_payload(body)

    def test_parse_skips_rows_that_do_not_decode(self) -> None:
        skipped: list[int] = []
        movies = parse_collection_payload(
            {"data": [{"id": 1, "title": "A"}, {"id": "", "title": ""}, 7, {"id": 2, "title": "B"}]},
            on_skip=lambda index, exc: skipped.append(index),
        )
        self.assertEqual([m.id for m in movies], [1, 2])
        self.assertEqual(skipped, [1, 2])
