import enum

class PatientType(enum.Enum):
    GENERAL = "general"
    PREMIUM = "premium"
    EMERGENCY = "emergency"

class AppointmentStatus(enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not AppointmentStatus.SCHEDULED

class NotificationType(enum.Enum):
    EMAIL = "email"
    SMS = "sms"
