from typing import Optional

from meditrack.models.reflection import REFLECTIONS_COLLECTION, Reflection, ReflectionIn
from meditrack.services.reflection_service import build_reflection
from meditrack.views.base import DomainView


class ReflectionsView(DomainView[Reflection]):
    collection = REFLECTIONS_COLLECTION
    record_model = Reflection
    order_by = "date"
    noun = "Reflection"

    def create(self, form: ReflectionIn) -> Optional[Reflection]:
        return self._create(build_reflection(form, self.owner_id), "Reflection saved")
