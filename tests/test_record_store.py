import unittest

from google.api_core import exceptions as gexc

from meditrack.core.errors import NOT_FOUND, PERMISSION_DENIED, UNAVAILABLE, UNKNOWN, StoreError
from meditrack.services.record_store import RecordStore
from tests.fake_firestore import FakeFirestore


class TestRecordStore(unittest.TestCase):
    def setUp(self):
        self.db = FakeFirestore()
        self.store = RecordStore(self.db)

    def test_create_assigns_id_and_timestamp(self):
        record = self.store.create("patients", {"ownerId": "doc-1", "anonymousId": "PAC-001"})
        self.assertTrue(record["id"])
        self.assertIn("createdAt", record)
        self.assertEqual(self.db.collection("patients").docs[record["id"]]["anonymousId"], "PAC-001")

    def test_list_is_owner_filtered_and_newest_first(self):
        self.db.seed("patients", "a", {"ownerId": "doc-1", "createdAt": "2026-01-01T10:00:00+00:00"})
        self.db.seed("patients", "b", {"ownerId": "doc-2", "createdAt": "2026-01-02T10:00:00+00:00"})
        self.db.seed("patients", "c", {"ownerId": "doc-1", "createdAt": "2026-01-03T10:00:00+00:00"})

        records = self.store.list("patients", "doc-1")
        self.assertEqual([r["id"] for r in records], ["c", "a"])

    def test_update_merges_fields_and_keeps_owner(self):
        self.db.seed("professionalGoals", "g1", {"ownerId": "doc-1", "goal": "ACLS", "status": "pending"})
        self.store.update("professionalGoals", "g1", {"status": "completed", "ownerId": "intruder"}, "doc-1")

        stored = self.db.collection("professionalGoals").docs["g1"]
        self.assertEqual(stored, {"ownerId": "doc-1", "goal": "ACLS", "status": "completed"})

    def test_update_of_foreign_record_is_denied(self):
        self.db.seed("professionalGoals", "g1", {"ownerId": "doc-2", "goal": "ACLS", "status": "pending"})
        with self.assertRaises(StoreError) as ctx:
            self.store.update("professionalGoals", "g1", {"status": "completed"}, "doc-1")
        self.assertEqual(ctx.exception.kind, PERMISSION_DENIED)
        self.assertEqual(self.db.collection("professionalGoals").docs["g1"]["status"], "pending")

    def test_second_delete_is_not_found_and_leaves_others(self):
        self.db.seed("reflections", "r1", {"ownerId": "doc-1", "learning": "a"})
        self.db.seed("reflections", "r2", {"ownerId": "doc-1", "learning": "b"})

        self.store.delete("reflections", "r1", "doc-1")
        with self.assertRaises(StoreError) as ctx:
            self.store.delete("reflections", "r1", "doc-1")

        self.assertEqual(ctx.exception.kind, NOT_FOUND)
        self.assertEqual(list(self.db.collection("reflections").docs), ["r2"])

    def test_delete_of_foreign_record_is_denied(self):
        self.db.seed("reflections", "r1", {"ownerId": "doc-2", "learning": "a"})
        with self.assertRaises(StoreError) as ctx:
            self.store.delete("reflections", "r1", "doc-1")
        self.assertEqual(ctx.exception.kind, PERMISSION_DENIED)
        self.assertIn("r1", self.db.collection("reflections").docs)

    def test_firestore_errors_are_tagged(self):
        cases = [
            (gexc.PermissionDenied("Missing or insufficient permissions."), PERMISSION_DENIED),
            (gexc.ServiceUnavailable("backend down"), UNAVAILABLE),
            (gexc.NotFound("gone"), NOT_FOUND),
            (RuntimeError("boom"), UNKNOWN),
        ]
        for exc, kind in cases:
            self.db.fail_next(exc)
            with self.assertRaises(StoreError) as ctx:
                self.store.list("patients", "doc-1")
            self.assertEqual(ctx.exception.kind, kind)

    def test_subscribe_delivers_full_sorted_snapshots(self):
        seen = []
        unsubscribe = self.store.subscribe("patients", "doc-1", seen.append)
        self.assertEqual(seen, [[]])

        self.db.seed("patients", "old", {"ownerId": "doc-1", "createdAt": "2026-01-01T00:00:00+00:00"})
        self.store.create("patients", {"ownerId": "doc-1"})
        self.store.create("patients", {"ownerId": "doc-2"})

        latest = seen[-1]
        self.assertEqual(len(latest), 2)
        self.assertEqual(latest[-1]["id"], "old")

        unsubscribe()
        count = len(seen)
        self.store.create("patients", {"ownerId": "doc-1"})
        self.assertEqual(len(seen), count)


if __name__ == "__main__":
    unittest.main()
