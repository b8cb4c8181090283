"""Модели данных для календаря."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent, ShiftType


class EventType(str, Enum):
    """Типы событий в общем календаре."""
    CLASS = "class"
    SHIFT = "shift"
    ONCALL = "oncall"
    OFFDAY = "offday"


class UserRole(str, Enum):
    """Роли пользователей."""
    TEACHER = "teacher"
    DOCTOR = "doctor"


class RoleFilter(str, Enum):
    """Фильтр общего календаря по роли."""
    ALL = "all"
    TEACHER = "teacher"
    DOCTOR = "doctor"


@dataclass(frozen=True)
class ScheduleEvent:
    """Унифицированное событие календаря (производное, не сохраняется)."""

    id: str
    title: str
    start_time: str
    end_time: str
    type: EventType
    user: UserRole
    date: str
    details: Optional[str] = None
    shift_type: Optional[ShiftType] = None

    @property
    def is_all_day(self) -> bool:
        return self.type in (EventType.OFFDAY, EventType.ONCALL)


@dataclass
class ScheduleCollections:
    """Пять исходных коллекций расписания."""

    classes: List[ClassEvent] = field(default_factory=list)
    shifts: List[ShiftEvent] = field(default_factory=list)
    teacher_off_days: List[str] = field(default_factory=list)
    doctor_off_days: List[str] = field(default_factory=list)
    on_call_days: List[str] = field(default_factory=list)

    def copy(self) -> 'ScheduleCollections':
        """Поверхностная копия: новые списки, те же записи."""
        return ScheduleCollections(
            classes=list(self.classes),
            shifts=list(self.shifts),
            teacher_off_days=list(self.teacher_off_days),
            doctor_off_days=list(self.doctor_off_days),
            on_call_days=list(self.on_call_days),
        )


@dataclass(frozen=True)
class CalendarDot:
    """Точка-маркер на дате календаря."""
    key: str
    color: str


@dataclass
class DateMarking:
    """Разметка одной даты календаря."""

    marked: bool = False
    dots: List[CalendarDot] = field(default_factory=list)
    selected: bool = False
