"""Record store client over Cloud Firestore.

Every journal collection is addressed the same way: documents carry an
``ownerId`` field holding the Firebase UID of the clinician who created
them, and every read is filtered on it. Ordering is done in Python so the
owner filter never needs a composite index.

Failures are converted to ``StoreError`` and logged once. Nothing is
retried here.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from google.cloud.firestore import FieldFilter

from meditrack.core.errors import NOT_FOUND, PERMISSION_DENIED, StoreError, from_exception
from meditrack.models.base import OWNER_FIELD
from meditrack.services.logger import log_debug

log = logging.getLogger(__name__)

Record = Dict[str, Any]


def _to_record(doc) -> Record:
    return {"id": doc.id, **(doc.to_dict() or {})}


def sort_records(records: List[Record], order_by: str = "createdAt") -> List[Record]:
    """Newest first. Records without the sort key go last."""
    return sorted(records, key=lambda r: str(r.get(order_by) or ""), reverse=True)


class RecordStore:
    def __init__(self, db):
        self.db = db

    def _fail(self, action: str, collection: str, exc: Exception) -> StoreError:
        err = from_exception(exc)
        log.error("%s on %s failed [%s]: %s", action, collection, err.kind, err.message)
        return err

    def _owner_query(self, collection: str, owner_id: str):
        return self.db.collection(collection).where(filter=FieldFilter(OWNER_FIELD, "==", owner_id))

    # -------------------------
    # Reads
    # -------------------------
    def list(self, collection: str, owner_id: str, order_by: str = "createdAt") -> List[Record]:
        try:
            docs = self._owner_query(collection, owner_id).stream()
            records = [_to_record(d) for d in docs]
        except Exception as exc:
            raise self._fail("list", collection, exc) from exc

        log.debug("Loaded %d records from %s for %s", len(records), collection, owner_id)
        return sort_records(records, order_by)

    def get(self, collection: str, record_id: str) -> Record:
        try:
            doc = self.db.collection(collection).document(record_id).get()
        except Exception as exc:
            raise self._fail("get", collection, exc) from exc

        if not doc.exists:
            raise StoreError(NOT_FOUND, f"Record {record_id} not found in {collection}")
        return _to_record(doc)

    def _get_owned(self, collection: str, record_id: str, owner_id: str) -> Record:
        record = self.get(collection, record_id)
        if record.get(OWNER_FIELD) != owner_id:
            log.warning("Owner mismatch on %s/%s (caller %s)", collection, record_id, owner_id)
            raise StoreError(PERMISSION_DENIED, "Record belongs to another user")
        return record

    # -------------------------
    # Writes
    # -------------------------
    def create(self, collection: str, fields: Record) -> Record:
        payload = {**fields, "createdAt": datetime.now(timezone.utc).isoformat()}
        log_debug("store.create", {"collection": collection, "fields": payload})

        try:
            _, doc_ref = self.db.collection(collection).add(payload)
        except Exception as exc:
            raise self._fail("create", collection, exc) from exc

        log.info("Created %s/%s", collection, doc_ref.id)
        return {"id": doc_ref.id, **payload}

    def update(self, collection: str, record_id: str, partial: Record, owner_id: str) -> None:
        self._get_owned(collection, record_id, owner_id)

        # ownership and creation time are immutable
        changes = {k: v for k, v in partial.items() if k not in (OWNER_FIELD, "createdAt", "id")}
        if not changes:
            return
        log_debug("store.update", {"collection": collection, "id": record_id, "changes": changes})

        try:
            self.db.collection(collection).document(record_id).update(changes)
        except Exception as exc:
            raise self._fail("update", collection, exc) from exc

        log.info("Updated %s/%s (%s)", collection, record_id, ", ".join(sorted(changes)))

    def delete(self, collection: str, record_id: str, owner_id: str) -> None:
        self._get_owned(collection, record_id, owner_id)

        try:
            self.db.collection(collection).document(record_id).delete()
        except Exception as exc:
            raise self._fail("delete", collection, exc) from exc

        log.info("Deleted %s/%s", collection, record_id)

    # -------------------------
    # Live updates
    # -------------------------
    def subscribe(
        self,
        collection: str,
        owner_id: str,
        on_change: Callable[[List[Record]], None],
        order_by: str = "createdAt",
    ) -> Callable[[], None]:
        """
        Listen to the owner's slice of ``collection``.

        ``on_change`` gets the full re-sorted list on every snapshot.
        Returns a function that stops the listener.
        """

        def _on_snapshot(docs, changes, read_time):
            on_change(sort_records([_to_record(d) for d in docs], order_by))

        try:
            watch = self._owner_query(collection, owner_id).on_snapshot(_on_snapshot)
        except Exception as exc:
            raise self._fail("subscribe", collection, exc) from exc

        log.debug("Subscribed to %s for %s", collection, owner_id)
        return watch.unsubscribe
