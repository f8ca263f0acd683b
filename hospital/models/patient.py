from pydantic import BaseModel, Field
from hospital.models.enums import PatientType

class Patient(BaseModel):
    id: int = 0
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0)
    contact_number: str
    medical_history: str = ""
    patient_type: PatientType = PatientType.GENERAL

    def __repr__(self):
        return f"<Patient {self.id} {self.name} ({self.patient_type.value})>"
