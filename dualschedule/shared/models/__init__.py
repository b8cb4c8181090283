"""Модели данных расписания."""

from .schedule_data import (
    EventType,
    UserRole,
    RoleFilter,
    ScheduleEvent,
    ScheduleCollections,
    CalendarDot,
    DateMarking,
)
from .schedule_schemas import ClassCreate, ShiftCreate

__all__ = [
    "EventType",
    "UserRole",
    "RoleFilter",
    "ScheduleEvent",
    "ScheduleCollections",
    "CalendarDot",
    "DateMarking",
    "ClassCreate",
    "ShiftCreate",
]
