"""Pydantic models for professional goals."""
from typing import Literal, Optional

from pydantic import field_validator

from meditrack.models.base import JournalModel, StoredRecord, clean_text, require_text

GOALS_COLLECTION = "professionalGoals"

PENDING = "pending"
COMPLETED = "completed"
GoalStatus = Literal["pending", "completed"]


class GoalIn(JournalModel):
    goal: str
    target_date: str = ""

    @field_validator("goal", mode="before")
    @classmethod
    def validate_goal(cls, v):
        return require_text(v, "goal")

    @field_validator("target_date", mode="before")
    @classmethod
    def strip_date(cls, v):
        return clean_text(v)


class GoalUpdate(JournalModel):
    goal: Optional[str] = None
    target_date: Optional[str] = None
    status: Optional[GoalStatus] = None

    @field_validator("goal", mode="before")
    @classmethod
    def validate_goal(cls, v):
        return require_text(v, "goal")

    @field_validator("target_date", mode="before")
    @classmethod
    def strip_date(cls, v):
        return clean_text(v)

    @field_validator("status", mode="before")
    @classmethod
    def status_required(cls, v):
        if v is None:
            raise ValueError("status must be pending or completed")
        return v

    def changes(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ProfessionalGoal(StoredRecord):
    goal: str
    target_date: str = ""
    status: GoalStatus = PENDING

    @field_validator("target_date", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return clean_text(v)
