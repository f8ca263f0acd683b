from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
import logging

from hospital.config.settings import Settings, settings as default_settings
from hospital.models.enums import PatientType
from hospital.repositories import AppointmentRepository, DoctorRepository, PatientRepository
from hospital.schemas.doctor import DoctorCreate
from hospital.schemas.patient import PatientCreate
from hospital.services.appointment_events import (
    AppointmentSubject,
    DoctorNotificationObserver,
    PatientNotificationObserver,
)
from hospital.services.appointment_service import AppointmentService
from hospital.services.billing_service import BillingService
from hospital.services.doctor_service import DoctorService
from hospital.services.notification_service import create_notification_service
from hospital.services.patient_service import PatientService
from hospital.utils.hospital_logger import HospitalLogger


@dataclass
class Hospital:
    settings: Settings
    logger: HospitalLogger
    patient_repo: PatientRepository
    doctor_repo: DoctorRepository
    appointment_repo: AppointmentRepository
    appointment_subject: AppointmentSubject
    patient_service: PatientService
    doctor_service: DoctorService
    appointment_service: AppointmentService
    billing_service: BillingService


def build_hospital(config: Optional[Settings] = None, logger: Optional[HospitalLogger] = None) -> Hospital:
    """Wire repositories, observers and services around one shared audit log."""
    config = config or default_settings
    logger = logger or HospitalLogger(config.log_timestamp_format)

    patient_repo = PatientRepository(logger)
    doctor_repo = DoctorRepository(logger)
    appointment_repo = AppointmentRepository(logger)

    appointment_subject = AppointmentSubject()
    patient_channel = create_notification_service(config.patient_notification_channel, logger)
    staff_channel = create_notification_service(config.staff_notification_channel, logger)
    appointment_subject.attach(PatientNotificationObserver(patient_channel))
    appointment_subject.attach(DoctorNotificationObserver(staff_channel, config.staff_notification_address))

    return Hospital(
        settings=config,
        logger=logger,
        patient_repo=patient_repo,
        doctor_repo=doctor_repo,
        appointment_repo=appointment_repo,
        appointment_subject=appointment_subject,
        patient_service=PatientService(patient_repo),
        doctor_service=DoctorService(doctor_repo),
        appointment_service=AppointmentService(appointment_repo, patient_repo, doctor_repo, appointment_subject),
        billing_service=BillingService(logger),
    )


def configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="[%(asctime)s] %(message)s",
        datefmt=config.log_timestamp_format
    )


def section(title: str) -> None:
    print(f"\n{title}\n")


def run_demo(hospital: Hospital) -> None:
    config = hospital.settings
    minutes = config.demo_consultation_minutes

    print("========================================")
    print(f"   {config.app_title.upper()}")
    print("========================================")

    section("1. Adding Patients...")
    for patient in (
        PatientCreate(name="John Doe", age=35, contact_number="+1234567890", patient_type=PatientType.GENERAL),
        PatientCreate(name="Jane Smith", age=42, contact_number="+0987654321", patient_type=PatientType.PREMIUM),
        PatientCreate(name="Bob Johnson", age=28, contact_number="+1122334455", patient_type=PatientType.EMERGENCY),
    ):
        hospital.patient_service.register_patient(patient)

    section("2. Adding Doctors...")
    hospital.doctor_service.register_doctor(DoctorCreate(name="Dr. Sarah Williams", specialization="Cardiology"))
    hospital.doctor_service.register_doctor(DoctorCreate(name="Dr. Michael Brown", specialization="Neurology"))

    section("3. Booking Appointments...")
    now = datetime.now()
    first = hospital.appointment_service.book_appointment(1, 1, now + timedelta(days=1), "10:00 AM")
    second = hospital.appointment_service.book_appointment(2, 2, now + timedelta(days=2), "2:00 PM")

    section("4. Completing Appointment...")
    hospital.appointment_service.complete_appointment(first.id)

    section("5. Generating Bills (Strategy Pattern)...")
    for patient_type in PatientType:
        bill = hospital.billing_service.generate_bill(patient_type, minutes)
        print(f"{patient_type.value.capitalize()} Patient Bill ({minutes} min): ${bill}\n")

    section("6. Cancelling Appointment...")
    hospital.appointment_service.cancel_appointment(second.id)

    section("7. Displaying All Appointments...")
    for apt in hospital.appointment_service.get_all_appointments():
        print(f"Appointment ID: {apt.id}")
        print(f"Patient: {apt.patient.name}")
        print(f"Doctor: {apt.doctor.name}")
        print(f"Date: {apt.appointment_date:%Y-%m-%d}")
        print(f"Time: {apt.time_slot}")
        print(f"Status: {apt.status.value}")
        print("---")

    section("8. System Logs...")
    print(f"Total logs captured: {len(hospital.logger)}")

    print("\n========================================")
    print("   DEMONSTRATION COMPLETE")
    print("========================================")


def main() -> None:
    configure_logging(default_settings)
    run_demo(build_hospital(default_settings))


if __name__ == "__main__":
    main()
