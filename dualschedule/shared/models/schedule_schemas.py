"""
Схемы Pydantic для создания занятий и смен
"""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent, ShiftType

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"
DATE_FORMAT_MESSAGE = "Дата должна быть в формате YYYY-MM-DD"


def validate_date_string(value: str) -> str:
    """Проверка даты YYYY-MM-DD; поднимает ValueError."""
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except (TypeError, ValueError):
        raise ValueError(DATE_FORMAT_MESSAGE)
    return value


class ScheduleEntryBase(BaseModel):
    """Базовая схема записи расписания."""
    title: str = Field(..., description="Название")
    start_time: str = Field(..., description="Время начала")
    end_time: str = Field(..., description="Время окончания")
    location: str = Field("", description="Место")
    date: str = Field(..., description="Дата в формате YYYY-MM-DD")

    @field_validator('title', 'start_time', 'end_time')
    @classmethod
    def validate_required(cls, v: str) -> str:
        """Обязательные поля не могут быть пустыми."""
        if not v or not v.strip():
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return v

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Валидация даты."""
        return validate_date_string(v)


class ClassCreate(ScheduleEntryBase):
    """Схема для создания занятия."""

    def to_entity(self, doc_id: str) -> ClassEvent:
        return ClassEvent(
            id=doc_id,
            title=self.title,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
            date=self.date,
        )


class ShiftCreate(ScheduleEntryBase):
    """Схема для создания смены."""
    type: ShiftType = Field(ShiftType.MORNING, description="Тип смены")

    def to_entity(self, doc_id: str) -> ShiftEvent:
        return ShiftEvent(
            id=doc_id,
            title=self.title,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
            date=self.date,
            type=self.type,
        )
