from hospital.repositories.base import InMemoryRepository
from hospital.repositories.patient_repository import PatientRepository
from hospital.repositories.doctor_repository import DoctorRepository
from hospital.repositories.appointment_repository import AppointmentRepository

__all__ = ["InMemoryRepository", "PatientRepository", "DoctorRepository", "AppointmentRepository"]
