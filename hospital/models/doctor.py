from typing import List
from pydantic import BaseModel, Field

class Doctor(BaseModel):
    id: int = 0
    name: str = Field(..., min_length=1, max_length=100)
    specialization: str = "General Medicine"
    is_available: bool = True
    available_time_slots: List[str] = Field(default_factory=list)

    def __repr__(self):
        return f"<Doctor {self.id} {self.name} - {self.specialization}>"
