from pydantic import BaseModel, Field
from hospital.models.enums import PatientType

class PatientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=150)
    contact_number: str = Field(..., min_length=1, max_length=20)
    patient_type: PatientType = PatientType.GENERAL
