from hospital.models.enums import PatientType, AppointmentStatus, NotificationType
from hospital.models.patient import Patient
from hospital.models.doctor import Doctor
from hospital.models.appointment import Appointment

__all__ = ["PatientType", "AppointmentStatus", "NotificationType", "Patient", "Doctor", "Appointment"]
