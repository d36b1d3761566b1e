from meditrack.models.base import OWNER_FIELD, today_iso
from meditrack.models.reflection import ReflectionIn


def build_reflection(form: ReflectionIn, owner_id: str) -> dict:
    doc = form.to_document()
    doc["date"] = form.date or today_iso()
    doc[OWNER_FIELD] = owner_id
    return doc
