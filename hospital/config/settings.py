from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    app_title: str = "Hospital Management System"
    app_version: str = "1.0.0"

    log_level: str = "info"
    log_timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    staff_notification_address: str = "doctor@hospital.com"
    patient_notification_channel: str = "sms"
    staff_notification_channel: str = "email"

    demo_consultation_minutes: int = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
