"""Pydantic models for anonymized patient consultations.

This is NOT patient-identifying data: ``anonymousId`` is a code chosen by
the clinician (e.g. ``PAC-001``).
"""
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from meditrack.core.config import settings
from meditrack.models.base import JournalModel, StoredRecord, clean_text, require_text

PATIENTS_COLLECTION = "patients"

CATEGORIES = ("General", "Pediátrico", "Crónico", "Emergencia", "Cirugía", "Seguimiento")
Category = Literal["General", "Pediátrico", "Crónico", "Emergencia", "Cirugía", "Seguimiento"]

_TEXT_FIELDS = ("diagnosis", "treatment", "observations", "lessons_learned", "follow_up_date")


def normalize_duration(value: Any) -> int:
    """Consultation length in whole minutes; anything unusable falls back to the default."""
    default = settings.DEFAULT_DURATION_MINUTES
    if value is None or isinstance(value, bool):
        return default
    try:
        minutes = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return minutes if minutes > 0 else default


class PatientIn(JournalModel):
    """Create form. Only ``anonymousId`` and ``reason`` are mandatory."""

    anonymous_id: str
    reason: str
    consultation_date: Optional[str] = None
    consultation_time: Optional[str] = None
    diagnosis: str = ""
    treatment: str = ""
    observations: str = ""
    lessons_learned: str = ""
    category: Optional[Category] = None
    duration_minutes: Any = Field(default=None, validate_default=True)
    follow_up_date: str = ""

    @field_validator("anonymous_id", mode="before")
    @classmethod
    def validate_anonymous_id(cls, v):
        return require_text(v, "anonymousId")

    @field_validator("reason", mode="before")
    @classmethod
    def validate_reason(cls, v):
        return require_text(v, "reason")

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def strip_text(cls, v):
        return clean_text(v)

    @field_validator("consultation_date", "consultation_time", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        v = clean_text(v)
        return v or None

    @field_validator("category", mode="before")
    @classmethod
    def blank_category(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("duration_minutes", mode="after")
    @classmethod
    def validate_duration(cls, v):
        return normalize_duration(v)


class PatientUpdate(JournalModel):
    """Partial edit. Fields left out of the payload are not touched."""

    anonymous_id: Optional[str] = None
    reason: Optional[str] = None
    consultation_date: Optional[str] = None
    consultation_time: Optional[str] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    observations: Optional[str] = None
    lessons_learned: Optional[str] = None
    category: Optional[Category] = None
    duration_minutes: Any = None
    follow_up_date: Optional[str] = None

    @field_validator("anonymous_id", mode="before")
    @classmethod
    def validate_anonymous_id(cls, v):
        return require_text(v, "anonymousId")

    @field_validator("reason", mode="before")
    @classmethod
    def validate_reason(cls, v):
        return require_text(v, "reason")

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def strip_text(cls, v):
        return clean_text(v)

    @field_validator("consultation_date", "consultation_time", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        v = clean_text(v)
        return v or None

    @field_validator("category", mode="before")
    @classmethod
    def blank_category(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return settings.DEFAULT_CATEGORY
        return v.strip() if isinstance(v, str) else v

    @field_validator("duration_minutes", mode="after")
    @classmethod
    def validate_duration(cls, v):
        return normalize_duration(v)

    def changes(self) -> dict:
        # a blank date or time leaves the stored value as it is
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class PatientConsultation(StoredRecord):
    anonymous_id: str
    reason: str
    consultation_date: str = ""
    consultation_time: str = ""
    diagnosis: str = ""
    treatment: str = ""
    observations: str = ""
    lessons_learned: str = ""
    category: str = ""
    duration_minutes: int = 20
    follow_up_date: str = ""

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def validate_duration(cls, v):
        return normalize_duration(v)

    @field_validator("category", "follow_up_date", "diagnosis", "treatment", "observations", "lessons_learned", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return clean_text(v)
