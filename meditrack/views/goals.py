from typing import List, Optional

from pydantic import ValidationError

from meditrack.core.errors import UNKNOWN, StoreError
from meditrack.models.goal import COMPLETED, GOALS_COLLECTION, GoalIn, GoalUpdate, ProfessionalGoal
from meditrack.services.goal_service import build_goal, partition_goals, toggled_status
from meditrack.views.base import DomainView, ViewState


class GoalsView(DomainView[ProfessionalGoal]):
    collection = GOALS_COLLECTION
    record_model = ProfessionalGoal
    noun = "Goal"

    @property
    def pending(self) -> List[ProfessionalGoal]:
        return partition_goals(self.records)[0]

    @property
    def completed(self) -> List[ProfessionalGoal]:
        return partition_goals(self.records)[1]

    def create(self, form: GoalIn) -> Optional[ProfessionalGoal]:
        return self._create(build_goal(form, self.owner_id), "Goal added")

    def update(self, goal_id: str, form: GoalUpdate) -> bool:
        return self._update(goal_id, form.changes(), "Goal updated")

    def _read_goal(self, goal_id: str) -> ProfessionalGoal:
        raw = self.store.get(self.collection, goal_id)
        try:
            return self.record_model.model_validate(raw)
        except ValidationError as exc:
            raise StoreError(UNKNOWN, f"goal {goal_id} is malformed ({exc.error_count()} errors)") from exc

    def toggle(self, goal_id: str) -> Optional[str]:
        """Flip pending <-> completed. Returns the new status, or None on failure."""
        goal = self.find(goal_id)
        if goal is None:
            previous = self.state
            goal = self._attempt(ViewState.LOADING, lambda: self._read_goal(goal_id), "Could not update goal")
            if goal is None:
                return None
            self.state = previous

        new_status = toggled_status(goal.status)
        message = "Goal completed!" if new_status == COMPLETED else "Goal reopened"
        if not self._update(goal_id, {"status": new_status}, message):
            return None
        return new_status
