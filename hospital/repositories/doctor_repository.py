from typing import List
from hospital.models.doctor import Doctor
from hospital.repositories.base import InMemoryRepository

class DoctorRepository(InMemoryRepository[Doctor]):
    entity_name = "Doctor"

    def get_by_specialization(self, specialization: str) -> List[Doctor]:
        wanted = specialization.strip().casefold()
        return [d for d in self._items if d.specialization.casefold() == wanted]

    def get_available(self) -> List[Doctor]:
        return [d for d in self._items if d.is_available]
