from typing import List
from hospital.models.enums import PatientType
from hospital.models.patient import Patient
from hospital.repositories.base import InMemoryRepository

class PatientRepository(InMemoryRepository[Patient]):
    entity_name = "Patient"

    def get_by_type(self, patient_type: PatientType) -> List[Patient]:
        return [p for p in self._items if p.patient_type == patient_type]
