"""
Tests for the session store and its storage backends.
Run from the project root: python -m pytest tests/test_session_store.py -v
"""
import json
import os
import stat
import tempfile
import unittest
from pathlib import Path

from schemas.auth import Principal
from services.session_store import (
    PRINCIPAL_KEY,
    TOKEN_KEY,
    FileStorage,
    MemoryStorage,
    SessionStore,
)


def _principal():
    return Principal(id="a1", display_name="admin", email="admin@example.com")


class TestSessionStore(unittest.TestCase):
    def test_starts_empty_and_loading(self):
        store = SessionStore(MemoryStorage())
        self.assertTrue(store.loading)
        self.assertIsNone(store.credential)
        self.assertIsNone(store.principal)
        self.assertFalse(store.is_authenticated)

    def test_set_persists_both_keys(self):
        storage = MemoryStorage()
        store = SessionStore(storage)
        store.set("tok-1", _principal())
        self.assertEqual(storage.get(TOKEN_KEY), "tok-1")
        self.assertEqual(
            json.loads(storage.get(PRINCIPAL_KEY)),
            {"id": "a1", "username": "admin", "email": "admin@example.com"},
        )
        self.assertTrue(store.is_authenticated)
        self.assertEqual(store.session.principal.display_name, "admin")

    def test_set_rejects_empty_credential(self):
        store = SessionStore(MemoryStorage())
        with self.assertRaises(ValueError):
            store.set("", _principal())
        self.assertFalse(store.is_authenticated)

    def test_restore_complete_pair(self):
        storage = MemoryStorage()
        SessionStore(storage).set("tok-1", _principal())

        restored = SessionStore(storage)
        session = restored.restore()
        self.assertFalse(restored.loading)
        self.assertEqual(session.credential, "tok-1")
        self.assertEqual(session.principal.email, "admin@example.com")

    def test_restore_ignores_half_a_session(self):
        """Token without principal (or the reverse) leaves the session empty."""
        for initial in ({TOKEN_KEY: "tok-1"}, {PRINCIPAL_KEY: '{"id": "a1", "username": "x", "email": "e"}'}):
            store = SessionStore(MemoryStorage(initial))
            session = store.restore()
            self.assertIsNone(session.credential)
            self.assertIsNone(session.principal)
            self.assertFalse(store.loading)

    def test_restore_ignores_malformed_principal(self):
        store = SessionStore(MemoryStorage({TOKEN_KEY: "tok-1", PRINCIPAL_KEY: '{"id": "a1"}'}))
        session = store.restore()
        self.assertIsNone(session.credential)
        self.assertFalse(store.is_authenticated)

    def test_clear_erases_memory_and_storage(self):
        storage = MemoryStorage()
        store = SessionStore(storage)
        store.set("tok-1", _principal())
        store.clear()
        self.assertIsNone(store.credential)
        self.assertIsNone(store.principal)
        self.assertIsNone(storage.get(TOKEN_KEY))
        self.assertIsNone(storage.get(PRINCIPAL_KEY))


class TestFileStorage(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "session.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_session_survives_a_new_store(self):
        SessionStore(FileStorage(self.path)).set("tok-9", _principal())
        self.assertTrue(self.path.exists())

        store = SessionStore(FileStorage(self.path))
        store.restore()
        self.assertEqual(store.credential, "tok-9")
        self.assertEqual(store.principal.id, "a1")

    @unittest.skipIf(os.name == "nt", "POSIX permissions")
    def test_file_is_private_to_owner(self):
        self.path.write_text("{}", encoding="utf-8")
        os.chmod(self.path, 0o644)
        SessionStore(FileStorage(self.path)).set("tok-9", _principal())
        self.assertEqual(stat.S_IMODE(self.path.stat().st_mode), 0o600)

    def test_clear_removes_file(self):
        store = SessionStore(FileStorage(self.path))
        store.set("tok-9", _principal())
        store.clear()
        self.assertFalse(self.path.exists())

    def test_unreadable_file_is_empty(self):
        self.path.write_text("not json", encoding="utf-8")
        store = SessionStore(FileStorage(self.path))
        self.assertIsNone(store.restore().credential)


if __name__ == "__main__":
    unittest.main()
