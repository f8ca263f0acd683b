from typing import List
from hospital.models.doctor import Doctor
from hospital.repositories.doctor_repository import DoctorRepository
from hospital.schemas.doctor import DoctorCreate
from hospital.utils.exceptions import NotFoundError

class DoctorService:
    def __init__(self, doctor_repo: DoctorRepository):
        self.doctor_repo = doctor_repo

    def register_doctor(self, doctor_data: DoctorCreate) -> Doctor:
        doctor = Doctor(**doctor_data.model_dump())
        return self.doctor_repo.add(doctor)

    def get_doctor_by_id(self, doctor_id: int) -> Doctor:
        doctor = self.doctor_repo.get_by_id(doctor_id)
        if doctor is None:
            raise NotFoundError(f"Doctor with ID {doctor_id} not found")
        return doctor

    def get_all_doctors(self) -> List[Doctor]:
        return self.doctor_repo.get_all()

    def get_doctors_by_specialization(self, specialization: str) -> List[Doctor]:
        return self.doctor_repo.get_by_specialization(specialization)

    def set_availability(self, doctor_id: int, is_available: bool) -> Doctor:
        doctor = self.get_doctor_by_id(doctor_id)
        doctor.is_available = is_available
        self.doctor_repo.update(doctor)
        return doctor

    def add_time_slot(self, doctor_id: int, time_slot: str) -> Doctor:
        # Slot labels are not checked against bookings
        doctor = self.get_doctor_by_id(doctor_id)
        doctor.available_time_slots.append(time_slot)
        self.doctor_repo.update(doctor)
        return doctor
