from datetime import datetime
from typing import List
import logging

from hospital.models.appointment import Appointment
from hospital.models.enums import AppointmentStatus
from hospital.repositories.appointment_repository import AppointmentRepository
from hospital.repositories.doctor_repository import DoctorRepository
from hospital.repositories.patient_repository import PatientRepository
from hospital.schemas.appointment import AppointmentCreate
from hospital.services.appointment_events import AppointmentSubject
from hospital.utils.exceptions import DoctorUnavailableError, NotFoundError

logger = logging.getLogger("appointments")

class AppointmentService:
    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        patient_repo: PatientRepository,
        doctor_repo: DoctorRepository,
        appointment_subject: AppointmentSubject
    ):
        self.appointment_repo = appointment_repo
        self.patient_repo = patient_repo
        self.doctor_repo = doctor_repo
        self.appointment_subject = appointment_subject

    def book_appointment(self, patient_id: int, doctor_id: int, appointment_date: datetime, time_slot: str) -> Appointment:
        patient = self.patient_repo.get_by_id(patient_id)
        doctor = self.doctor_repo.get_by_id(doctor_id)

        if patient is None or doctor is None:
            missing = f"Patient with ID {patient_id}" if patient is None else f"Doctor with ID {doctor_id}"
            raise NotFoundError(f"{missing} not found")

        if not doctor.is_available:
            raise DoctorUnavailableError(f"Doctor {doctor.name} is not available")

        appointment = Appointment(
            patient=patient,
            doctor=doctor,
            appointment_date=appointment_date,
            time_slot=time_slot
        )
        self.appointment_repo.add(appointment)
        logger.debug(f"Booked appointment {appointment.id} for patient {patient_id} with doctor {doctor_id}")

        self.appointment_subject.notify(appointment)
        return appointment

    def book_from_request(self, request: AppointmentCreate) -> Appointment:
        return self.book_appointment(
            request.patient_id,
            request.doctor_id,
            request.appointment_date,
            request.time_slot
        )

    def get_appointment_by_id(self, appointment_id: int) -> Appointment:
        appointment = self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError(f"Appointment with ID {appointment_id} not found")
        return appointment

    def get_all_appointments(self) -> List[Appointment]:
        return self.appointment_repo.get_all()

    def get_appointments_by_patient(self, patient_id: int) -> List[Appointment]:
        return self.appointment_repo.get_by_patient(patient_id)

    def get_appointments_by_doctor(self, doctor_id: int) -> List[Appointment]:
        return self.appointment_repo.get_by_doctor(doctor_id)

    def _change_status(self, appointment_id: int, status: AppointmentStatus) -> Appointment:
        appointment = self.get_appointment_by_id(appointment_id)

        if appointment.status.is_terminal:
            # Accepted as-is: the status is rewritten and observers hear about it again.
            logger.warning(
                f"Appointment {appointment_id} is already {appointment.status.value}, setting {status.value}"
            )

        appointment.status = status
        self.appointment_repo.update(appointment)
        self.appointment_subject.notify(appointment)
        return appointment

    def cancel_appointment(self, appointment_id: int) -> Appointment:
        return self._change_status(appointment_id, AppointmentStatus.CANCELLED)

    def complete_appointment(self, appointment_id: int) -> Appointment:
        return self._change_status(appointment_id, AppointmentStatus.COMPLETED)
