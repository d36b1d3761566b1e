from typing import List, Optional

from meditrack.models.patient import PATIENTS_COLLECTION, PatientConsultation, PatientIn, PatientUpdate
from meditrack.services.patient_service import build_patient, search_patients
from meditrack.views.base import DomainView


class PatientsView(DomainView[PatientConsultation]):
    collection = PATIENTS_COLLECTION
    record_model = PatientConsultation
    noun = "Patient"

    def search(self, term: str) -> List[PatientConsultation]:
        return search_patients(self.records, term)

    def create(self, form: PatientIn) -> Optional[PatientConsultation]:
        return self._create(build_patient(form, self.owner_id), "Patient registered")

    def update(self, patient_id: str, form: PatientUpdate) -> bool:
        return self._update(patient_id, form.changes(), "Patient updated")
