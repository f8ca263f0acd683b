from datetime import datetime

import pytest

from hospital.config.settings import Settings
from hospital.main import build_hospital
from hospital.models import Doctor, Patient, PatientType
from hospital.utils.hospital_logger import HospitalLogger


@pytest.fixture
def hospital_logger():
    return HospitalLogger()


@pytest.fixture
def test_settings():
    return Settings(_env_file=None)


@pytest.fixture
def hospital(test_settings, hospital_logger):
    return build_hospital(test_settings, hospital_logger)


@pytest.fixture
def seeded_hospital(hospital):
    hospital.patient_repo.add(Patient(name="John Doe", age=35, contact_number="+1234567890"))
    hospital.patient_repo.add(
        Patient(name="Jane Smith", age=42, contact_number="+0987654321", patient_type=PatientType.PREMIUM)
    )
    hospital.doctor_repo.add(Doctor(name="Dr. Sarah Williams", specialization="Cardiology"))
    hospital.doctor_repo.add(Doctor(name="Dr. Michael Brown", specialization="Neurology", is_available=False))
    return hospital


@pytest.fixture
def tomorrow():
    return datetime(2026, 10, 19, 10, 0)
