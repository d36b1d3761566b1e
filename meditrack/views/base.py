"""
View controllers for the journal pages.

A view owns one collection's list for the signed-in clinician and walks
an explicit state machine:

    IDLE -> LOADING -> LOADED -> {CREATING, UPDATING, DELETING} -> LOADED
                                 any store failure -> ERROR

ERROR is left by calling ``load()`` again. Store failures never escape a
view: they are logged, stored on ``error`` and turned into a transient
``notification``, and the record list keeps its pre-operation content.
After every successful write the list is re-fetched from the store.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from meditrack.core.errors import StoreError
from meditrack.models.base import StoredRecord
from meditrack.models.user import UserIdentity
from meditrack.services.record_store import RecordStore, sort_records

log = logging.getLogger(__name__)

R = TypeVar("R", bound=StoredRecord)


def dump_records(records) -> List[dict]:
    return [r.to_document() for r in records]


def parse_records(model: Type[R], raw: List[dict], collection: str) -> List[R]:
    """Validate fetched documents; malformed ones are logged and skipped."""
    records = []
    for doc in raw:
        try:
            records.append(model.model_validate(doc))
        except ValidationError as exc:
            log.warning("Skipping malformed %s/%s: %d errors", collection, doc.get("id"), exc.error_count())
    return records


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    CREATING = "creating"
    UPDATING = "updating"
    DELETING = "deleting"
    ERROR = "error"


BUSY_STATES = (ViewState.LOADING, ViewState.CREATING, ViewState.UPDATING, ViewState.DELETING)


class Notification(BaseModel):
    level: Literal["success", "error", "warning"]
    message: str


class InvalidTransition(RuntimeError):
    """A mutation was requested while the view is busy or failed."""


class BaseView:
    def __init__(self, store: RecordStore, identity: UserIdentity):
        self.store = store
        self.identity = identity
        self.state = ViewState.IDLE
        self.error: Optional[StoreError] = None
        self.notification: Optional[Notification] = None

    @property
    def owner_id(self) -> str:
        return self.identity.id

    def notify(self, level: str, message: str):
        self.notification = Notification(level=level, message=message)

    def _begin(self, state: ViewState):
        if state is not ViewState.LOADING and (self.state in BUSY_STATES or self.state is ViewState.ERROR):
            raise InvalidTransition(f"cannot start {state.value} while {self.state.value}")
        self.state = state

    def _attempt(self, state: ViewState, action: Callable, failure: str):
        """Run one store-facing action under ``state``; returns None on failure."""
        self._begin(state)
        try:
            result = action()
        except StoreError as err:
            log.error("%s: %s [%s] %s", type(self).__name__, failure, err.kind, err.message)
            self.error = err
            self.state = ViewState.ERROR
            self.notify("error", f"{failure}: {err.user_message()}")
            return None
        self.error = None
        return result


class DomainView(BaseView, Generic[R]):
    collection: str
    record_model: Type[R]
    order_by = "createdAt"
    noun = "Record"

    def __init__(self, store: RecordStore, identity: UserIdentity):
        super().__init__(store, identity)
        self.records: List[R] = []

    def _parse(self, raw: List[dict]) -> List[R]:
        return parse_records(self.record_model, raw, self.collection)

    def load(self) -> bool:
        raw = self._attempt(
            ViewState.LOADING,
            lambda: self.store.list(self.collection, self.owner_id, order_by=self.order_by),
            f"Could not load {self.noun.lower()}s",
        )
        if raw is None:
            return False
        self.records = self._parse(raw)
        self.state = ViewState.LOADED
        return True

    def _replace(self, raw: List[dict]):
        self.records = self._parse(sort_records(raw, self.order_by))
        self.state = ViewState.LOADED

    def watch(self) -> Optional[Callable[[], None]]:
        """Live mode: every remote change replaces the whole list."""
        unsubscribe = self._attempt(
            ViewState.LOADING,
            lambda: self.store.subscribe(self.collection, self.owner_id, self._replace, order_by=self.order_by),
            f"Could not watch {self.noun.lower()}s",
        )
        return unsubscribe

    def find(self, record_id: str) -> Optional[R]:
        return next((r for r in self.records if r.id == record_id), None)

    def _create(self, document: dict, message: str) -> Optional[R]:
        created = self._attempt(
            ViewState.CREATING,
            lambda: self.store.create(self.collection, document),
            f"Could not save {self.noun.lower()}",
        )
        if created is None:
            return None
        record = self.record_model.model_validate(created)
        if self.load():
            self.notify("success", message)
        return record

    def _update(self, record_id: str, changes: dict, message: str) -> bool:
        ok = self._attempt(
            ViewState.UPDATING,
            lambda: self.store.update(self.collection, record_id, changes, self.owner_id) or True,
            f"Could not update {self.noun.lower()}",
        )
        if not ok:
            return False
        if self.load():
            self.notify("success", message)
        return True

    def delete(self, record_id: str, confirmed: bool = False) -> bool:
        if not confirmed:
            self.notify("warning", f"Confirm to delete this {self.noun.lower()}")
            return False

        ok = self._attempt(
            ViewState.DELETING,
            lambda: self.store.delete(self.collection, record_id, self.owner_id) or True,
            f"Could not delete {self.noun.lower()}",
        )
        if not ok:
            return False
        self.records = [r for r in self.records if r.id != record_id]
        if self.load():
            self.notify("success", f"{self.noun} deleted")
        return True
