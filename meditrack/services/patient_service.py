"""Business logic for patient consultation records.

Turns validated form input into the Firestore document shape and
provides the in-memory search used by the patients list.
"""
from typing import List

from meditrack.core.config import settings
from meditrack.models.base import OWNER_FIELD, now_hhmm, today_iso
from meditrack.models.patient import PatientConsultation, PatientIn

SEARCH_FIELDS = ("anonymous_id", "diagnosis", "reason")


def build_patient(form: PatientIn, owner_id: str) -> dict:
    doc = form.to_document(exclude={"consultation_date", "consultation_time", "category"})
    doc.update(
        {
            OWNER_FIELD: owner_id,
            "consultationDate": form.consultation_date or today_iso(),
            "consultationTime": form.consultation_time or now_hhmm(),
            "category": form.category or settings.DEFAULT_CATEGORY,
        }
    )
    return doc


def search_patients(patients: List[PatientConsultation], term: str) -> List[PatientConsultation]:
    term = (term or "").strip().lower()
    if not term:
        return list(patients)
    return [
        p for p in patients
        if any(term in (getattr(p, f) or "").lower() for f in SEARCH_FIELDS)
    ]
