from dataclasses import dataclass
from typing import Dict, Protocol, Type, Union
from hospital.models.enums import NotificationType
from hospital.utils.exceptions import InvalidNotificationTypeError
from hospital.utils.hospital_logger import HospitalLogger


class NotificationService(Protocol):
    def send_notification(self, recipient: str, message: str) -> None:
        ...


@dataclass
class EmailNotificationService:
    """Console stand-in for an email gateway."""
    logger: HospitalLogger

    def send_notification(self, recipient: str, message: str) -> None:
        print(f"[EMAIL] To: {recipient} - {message}")
        self.logger.log(f"Email sent to {recipient}")


@dataclass
class SmsNotificationService:
    """Console stand-in for an SMS gateway."""
    logger: HospitalLogger

    def send_notification(self, recipient: str, message: str) -> None:
        print(f"[SMS] To: {recipient} - {message}")
        self.logger.log(f"SMS sent to {recipient}")


NOTIFICATION_SERVICES: Dict[NotificationType, Type[NotificationService]] = {
    NotificationType.EMAIL: EmailNotificationService,
    NotificationType.SMS: SmsNotificationService,
}


def parse_notification_type(value: Union[NotificationType, str]) -> NotificationType:
    if isinstance(value, NotificationType):
        return value
    try:
        return NotificationType(str(value).strip().lower())
    except ValueError:
        raise InvalidNotificationTypeError(f"Invalid notification type: {value!r}")


def create_notification_service(
    notification_type: Union[NotificationType, str],
    logger: HospitalLogger
) -> NotificationService:
    service_cls = NOTIFICATION_SERVICES.get(parse_notification_type(notification_type))
    if service_cls is None:
        raise InvalidNotificationTypeError(f"Invalid notification type: {notification_type!r}")
    return service_cls(logger)
