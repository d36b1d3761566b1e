"""Pydantic models for daily reflections. Reflections are never edited."""
from typing import Optional

from pydantic import field_validator

from meditrack.models.base import JournalModel, StoredRecord, clean_text, require_text

REFLECTIONS_COLLECTION = "reflections"


class ReflectionIn(JournalModel):
    learning: str
    date: Optional[str] = None
    challenges: str = ""
    achievements: str = ""

    @field_validator("learning", mode="before")
    @classmethod
    def validate_learning(cls, v):
        return require_text(v, "learning")

    @field_validator("challenges", "achievements", mode="before")
    @classmethod
    def strip_text(cls, v):
        return clean_text(v)

    @field_validator("date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return clean_text(v) or None


class Reflection(StoredRecord):
    learning: str
    date: str = ""
    challenges: str = ""
    achievements: str = ""

    @field_validator("date", "challenges", "achievements", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return clean_text(v)
