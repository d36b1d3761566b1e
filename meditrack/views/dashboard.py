from datetime import date
from typing import Optional

from meditrack.models.dashboard import DashboardStats
from meditrack.models.goal import GOALS_COLLECTION, ProfessionalGoal
from meditrack.models.patient import PATIENTS_COLLECTION, PatientConsultation
from meditrack.services.dashboard_stats import compute_stats
from meditrack.views.base import BaseView, ViewState, parse_records


class DashboardView(BaseView):
    """Read-only aggregate over the clinician's patients and goals."""

    def __init__(self, store, identity):
        super().__init__(store, identity)
        self.stats = DashboardStats()

    @property
    def greeting(self) -> str:
        name = self.identity.display_name or self.identity.email or ""
        return f"Bienvenido, Dr. {name}".strip()

    def _fetch(self):
        patients = self.store.list(PATIENTS_COLLECTION, self.owner_id)
        goals = self.store.list(GOALS_COLLECTION, self.owner_id)
        return patients, goals

    def load(self, today: Optional[date] = None) -> bool:
        fetched = self._attempt(ViewState.LOADING, self._fetch, "Could not load dashboard")
        if fetched is None:
            return False

        patients, goals = fetched
        self.stats = compute_stats(
            parse_records(PatientConsultation, patients, PATIENTS_COLLECTION),
            parse_records(ProfessionalGoal, goals, GOALS_COLLECTION),
            today=today,
        ).model_copy(update={"greeting": self.greeting})
        self.state = ViewState.LOADED
        return True
