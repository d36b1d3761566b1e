"""Shared pydantic base for journal records.

Firestore documents keep the camelCase field names the web frontend
writes (``anonymousId``, ``durationMinutes``...). Python code uses the
snake_case attribute names; ``model_dump(by_alias=True)`` produces the
document shape.
"""
from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

OWNER_FIELD = "ownerId"


class JournalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self, **kwargs) -> dict:
        return self.model_dump(by_alias=True, **kwargs)


class StoredRecord(JournalModel):
    # Firestore ignores unknown keys on read, so do we
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    owner_id: str
    created_at: Optional[str] = None


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def require_text(value: Any, label: str) -> str:
    text = clean_text(value)
    if not text:
        raise ValueError(f"{label} is required")
    return text


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def today_iso() -> str:
    return utc_today().isoformat()


def now_hhmm() -> str:
    return datetime.now(timezone.utc).strftime("%H:%M")
