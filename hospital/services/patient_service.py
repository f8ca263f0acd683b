from typing import List
from hospital.models.enums import PatientType
from hospital.models.patient import Patient
from hospital.repositories.patient_repository import PatientRepository
from hospital.schemas.patient import PatientCreate
from hospital.utils.exceptions import NotFoundError

class PatientService:
    def __init__(self, patient_repo: PatientRepository):
        self.patient_repo = patient_repo

    def register_patient(self, patient_data: PatientCreate) -> Patient:
        patient = Patient(**patient_data.model_dump())
        return self.patient_repo.add(patient)

    def get_patient_by_id(self, patient_id: int) -> Patient:
        patient = self.patient_repo.get_by_id(patient_id)
        if patient is None:
            raise NotFoundError(f"Patient with ID {patient_id} not found")
        return patient

    def get_all_patients(self) -> List[Patient]:
        return self.patient_repo.get_all()

    def get_patients_by_type(self, patient_type: PatientType) -> List[Patient]:
        return self.patient_repo.get_by_type(patient_type)

    def add_medical_history(self, patient_id: int, note: str) -> Patient:
        """Append a line to the patient's free-text history."""
        patient = self.get_patient_by_id(patient_id)
        note = note.strip()
        patient.medical_history = f"{patient.medical_history}\n{note}" if patient.medical_history else note
        self.patient_repo.update(patient)
        return patient
