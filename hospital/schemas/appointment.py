from datetime import datetime
from pydantic import BaseModel, Field

class AppointmentCreate(BaseModel):
    patient_id: int = Field(..., ge=1)
    doctor_id: int = Field(..., ge=1)
    appointment_date: datetime
    time_slot: str = Field(..., min_length=1, description="Free-form label, e.g. '10:00 AM'")
