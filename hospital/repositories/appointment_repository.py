from typing import List
from hospital.models.appointment import Appointment
from hospital.models.enums import AppointmentStatus
from hospital.repositories.base import InMemoryRepository

class AppointmentRepository(InMemoryRepository[Appointment]):
    entity_name = "Appointment"

    def describe(self, entity: Appointment) -> str:
        return f"ID {entity.id}"

    def _added_message(self, entity: Appointment) -> str:
        return f"Appointment created: ID {entity.id}"

    def get_by_patient(self, patient_id: int) -> List[Appointment]:
        return [a for a in self._items if a.patient.id == patient_id]

    def get_by_doctor(self, doctor_id: int) -> List[Appointment]:
        return [a for a in self._items if a.doctor.id == doctor_id]

    def get_by_status(self, status: AppointmentStatus) -> List[Appointment]:
        return [a for a in self._items if a.status == status]
