from typing import Optional


class HospitalError(Exception):
    """Base error for the hospital workflow. `detail` is the caller-facing message."""

    error_type = "HospitalError"

    def __init__(self, detail: str, error_type: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        if error_type:
            self.error_type = error_type


class NotFoundError(HospitalError):
    error_type = "NotFound"


class DoctorUnavailableError(HospitalError):
    error_type = "Unavailable"


class InvalidNotificationTypeError(HospitalError, ValueError):
    error_type = "InvalidSelector"


class StrategyNotConfiguredError(HospitalError):
    error_type = "StrategyNotConfigured"
