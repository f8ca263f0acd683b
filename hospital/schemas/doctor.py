from typing import List
from pydantic import BaseModel, Field

class DoctorCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    specialization: str = Field("General Medicine", min_length=1, max_length=100)
    is_available: bool = True
    available_time_slots: List[str] = Field(default_factory=list, description="Free-form slot labels, e.g. '10:00 AM'")
