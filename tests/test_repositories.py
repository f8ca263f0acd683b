from hospital.models import Appointment, AppointmentStatus, Doctor, Patient, PatientType
from hospital.repositories import AppointmentRepository, DoctorRepository, PatientRepository


def make_patient(name="John Doe", patient_type=PatientType.GENERAL):
    return Patient(name=name, age=30, contact_number="+1234567890", patient_type=patient_type)


def test_add_assigns_sequential_ids(hospital_logger):
    repo = PatientRepository(hospital_logger)

    ids = [repo.add(make_patient(f"Patient {i}")).id for i in range(3)]

    assert ids == [1, 2, 3]
    assert repo.get_by_id(2).name == "Patient 1"


def test_add_overwrites_incoming_id(hospital_logger):
    repo = PatientRepository(hospital_logger)
    patient = make_patient()
    patient.id = 42

    repo.add(patient)

    assert patient.id == 1
    assert repo.get_by_id(1) == patient
    assert repo.get_by_id(42) is None


def test_ids_are_not_reused_after_delete(hospital_logger):
    repo = DoctorRepository(hospital_logger)
    repo.add(Doctor(name="Dr. A"))
    repo.add(Doctor(name="Dr. B"))

    repo.delete(2)
    doctor = repo.add(Doctor(name="Dr. C"))

    assert doctor.id == 3
    assert [d.name for d in repo.get_all()] == ["Dr. A", "Dr. C"]


def test_get_all_returns_copy_in_insertion_order(hospital_logger):
    repo = PatientRepository(hospital_logger)
    repo.add(make_patient("First"))
    repo.add(make_patient("Second"))

    snapshot = repo.get_all()
    snapshot.clear()

    assert [p.name for p in repo.get_all()] == ["First", "Second"]


def test_delete_missing_id_is_noop(hospital_logger):
    repo = PatientRepository(hospital_logger)
    repo.add(make_patient())
    before = len(hospital_logger)

    repo.delete(99)

    assert repo.count() == 1
    assert len(hospital_logger) == before


def test_deleted_entity_not_listed(hospital_logger):
    repo = PatientRepository(hospital_logger)
    repo.add(make_patient("Keep"))
    repo.add(make_patient("Drop"))

    repo.delete(2)

    assert all(p.id != 2 for p in repo.get_all())
    assert len(repo) == 1


def test_update_replaces_in_place(hospital_logger):
    repo = PatientRepository(hospital_logger)
    repo.add(make_patient("First"))
    repo.add(make_patient("Second"))

    replacement = make_patient("First Renamed")
    replacement.id = 1
    repo.update(replacement)

    assert [p.name for p in repo.get_all()] == ["First Renamed", "Second"]


def test_update_missing_is_noop(hospital_logger):
    repo = PatientRepository(hospital_logger)
    ghost = make_patient("Ghost")
    ghost.id = 7

    repo.update(ghost)

    assert repo.get_all() == []
    assert hospital_logger.get_logs() == []


def test_log_lines_name_the_entity(hospital_logger, tomorrow):
    patients = PatientRepository(hospital_logger)
    doctors = DoctorRepository(hospital_logger)
    appointments = AppointmentRepository(hospital_logger)

    patient = patients.add(make_patient("John Doe"))
    doctor = doctors.add(Doctor(name="Dr. Sarah Williams"))
    appointments.add(Appointment(patient=patient, doctor=doctor, appointment_date=tomorrow, time_slot="10:00 AM"))
    patients.update(patient)
    doctors.delete(doctor.id)
    appointments.delete(1)

    messages = [entry.split("] ", 1)[1] for entry in hospital_logger.get_logs()]
    assert messages == [
        "Patient added: John Doe",
        "Doctor added: Dr. Sarah Williams",
        "Appointment created: ID 1",
        "Patient updated: John Doe",
        "Doctor deleted: Dr. Sarah Williams",
        "Appointment deleted: ID 1",
    ]


def test_doctor_queries(hospital_logger):
    repo = DoctorRepository(hospital_logger)
    repo.add(Doctor(name="Dr. A", specialization="Cardiology"))
    repo.add(Doctor(name="Dr. B", specialization="Neurology", is_available=False))
    repo.add(Doctor(name="Dr. C", specialization="cardiology"))

    assert [d.name for d in repo.get_by_specialization("CARDIOLOGY")] == ["Dr. A", "Dr. C"]
    assert [d.name for d in repo.get_available()] == ["Dr. A", "Dr. C"]


def test_appointment_queries(hospital_logger, tomorrow):
    patients = PatientRepository(hospital_logger)
    doctors = DoctorRepository(hospital_logger)
    appointments = AppointmentRepository(hospital_logger)
    john = patients.add(make_patient("John"))
    jane = patients.add(make_patient("Jane", PatientType.PREMIUM))
    doctor = doctors.add(Doctor(name="Dr. A"))

    appointments.add(Appointment(patient=john, doctor=doctor, appointment_date=tomorrow, time_slot="9:00 AM"))
    second = appointments.add(Appointment(patient=jane, doctor=doctor, appointment_date=tomorrow, time_slot="9:00 AM"))
    second.status = AppointmentStatus.CANCELLED

    assert [a.id for a in appointments.get_by_patient(jane.id)] == [2]
    assert [a.id for a in appointments.get_by_doctor(doctor.id)] == [1, 2]
    assert [a.id for a in appointments.get_by_status(AppointmentStatus.SCHEDULED)] == [1]
    assert [p.name for p in patients.get_by_type(PatientType.PREMIUM)] == ["Jane"]
