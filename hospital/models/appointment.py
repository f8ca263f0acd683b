from datetime import datetime
from pydantic import BaseModel
from hospital.models.enums import AppointmentStatus
from hospital.models.patient import Patient
from hospital.models.doctor import Doctor

class Appointment(BaseModel):
    id: int = 0
    patient: Patient
    doctor: Doctor
    appointment_date: datetime
    time_slot: str
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    def __repr__(self):
        return f"<Appointment {self.id}: {self.patient.name} with {self.doctor.name} on {self.appointment_date:%Y-%m-%d}>"
