"""Настройки приложения dualschedule."""

import os
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Основные настройки приложения."""

    model_config = SettingsConfigDict(
        # В production читаем .env.prod, иначе .env
        env_file=".env.prod" if os.getenv("ENVIRONMENT") == "production" else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Основные настройки
    app_name: str = "dualschedule"
    debug: bool = False
    environment: str = "development"
    version: str = "0.1.0"

    # Firebase / Firestore
    firebase_project_id: Optional[str] = None
    firebase_credentials_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("FIREBASE_CREDENTIALS_PATH", "GOOGLE_APPLICATION_CREDENTIALS"),
    )
    firestore_emulator_host: Optional[str] = None

    # Коллекции Firestore
    classes_collection: str = "classes"
    shifts_collection: str = "shifts"
    teacher_off_days_collection: str = "teacherOffDays"
    doctor_off_days_collection: str = "doctorOffDays"
    on_call_days_collection: str = "onCallDays"

    # Синхронизация
    use_sample_data_on_error: bool = True

    # Временные зоны
    default_timezone: str = "UTC"

    # Логирование
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: Optional[str] = None


# Создание экземпляра настроек
settings = Settings()


def validate_settings() -> None:
    """Валидация обязательных настроек."""
    missing_vars = []
    if not settings.firebase_project_id:
        missing_vars.append('firebase_project_id')

    if missing_vars:
        raise ValueError(f"Missing required environment variables: {missing_vars}")


# Валидация при импорте (только для production)
if settings.environment == "production":
    validate_settings()
