from typing import List, Tuple

from meditrack.models.base import OWNER_FIELD
from meditrack.models.goal import COMPLETED, PENDING, GoalIn, ProfessionalGoal


def build_goal(form: GoalIn, owner_id: str) -> dict:
    return {**form.to_document(), "status": PENDING, OWNER_FIELD: owner_id}


def toggled_status(status: str) -> str:
    return COMPLETED if status == PENDING else PENDING


def partition_goals(goals: List[ProfessionalGoal]) -> Tuple[List[ProfessionalGoal], List[ProfessionalGoal]]:
    pending = [g for g in goals if g.status == PENDING]
    completed = [g for g in goals if g.status == COMPLETED]
    return pending, completed
