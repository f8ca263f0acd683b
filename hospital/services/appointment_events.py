from dataclasses import dataclass
from typing import List, Protocol
from hospital.models.appointment import Appointment
from hospital.services.notification_service import NotificationService

DEFAULT_STAFF_ADDRESS = "doctor@hospital.com"


class AppointmentObserver(Protocol):
    def update(self, appointment: Appointment) -> None:
        ...


@dataclass
class PatientNotificationObserver:
    notification_service: NotificationService

    def update(self, appointment: Appointment) -> None:
        message = f"Your appointment (ID: {appointment.id}) status has been changed to {appointment.status.value}"
        self.notification_service.send_notification(appointment.patient.contact_number, message)


@dataclass
class DoctorNotificationObserver:
    notification_service: NotificationService
    staff_address: str = DEFAULT_STAFF_ADDRESS

    def update(self, appointment: Appointment) -> None:
        message = f"Appointment (ID: {appointment.id}) with {appointment.patient.name} - Status: {appointment.status.value}"
        self.notification_service.send_notification(self.staff_address, message)


class AppointmentSubject:
    """
    Fans an appointment status change out to every attached observer.

    Observers run synchronously in attachment order. An exception raised by
    one observer propagates to the caller and the remaining observers are
    not called.
    """

    def __init__(self):
        self._observers: List[AppointmentObserver] = []

    @property
    def observers(self) -> List[AppointmentObserver]:
        return list(self._observers)

    def attach(self, observer: AppointmentObserver) -> None:
        self._observers.append(observer)

    def detach(self, observer: AppointmentObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, appointment: Appointment) -> None:
        for observer in list(self._observers):
            observer.update(appointment)
