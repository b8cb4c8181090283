"""Сборка общего календаря из пяти коллекций расписания."""

from collections import defaultdict
from typing import Dict, List

from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent
from dualschedule.shared.models.schedule_data import (
    EventType,
    ScheduleCollections,
    ScheduleEvent,
    UserRole,
)

ALL_DAY = "All Day"

TEACHER_OFF_DAY_TITLE = "Teacher Off Day"
DOCTOR_OFF_DAY_TITLE = "Doctor Off Day"
ON_CALL_TITLE = "On-Call Duty"


def class_to_event(class_event: ClassEvent) -> ScheduleEvent:
    return ScheduleEvent(
        id=f"teacher-class-{class_event.id}",
        title=class_event.title,
        start_time=class_event.start_time,
        end_time=class_event.end_time,
        type=EventType.CLASS,
        user=UserRole.TEACHER,
        details=class_event.location,
        date=class_event.date,
    )


def shift_to_event(shift: ShiftEvent) -> ScheduleEvent:
    return ScheduleEvent(
        id=f"doctor-shift-{shift.id}",
        title=shift.title,
        start_time=shift.start_time,
        end_time=shift.end_time,
        type=EventType.SHIFT,
        user=UserRole.DOCTOR,
        details=shift.location,
        date=shift.date,
        shift_type=shift.type,
    )


def _all_day_event(event_id: str, title: str, event_type: EventType,
                   user: UserRole, date: str) -> ScheduleEvent:
    return ScheduleEvent(
        id=event_id,
        title=title,
        start_time=ALL_DAY,
        end_time="",
        type=event_type,
        user=user,
        date=date,
    )


def teacher_off_day_to_event(date: str) -> ScheduleEvent:
    return _all_day_event(f"teacher-offday-{date}", TEACHER_OFF_DAY_TITLE,
                          EventType.OFFDAY, UserRole.TEACHER, date)


def doctor_off_day_to_event(date: str) -> ScheduleEvent:
    return _all_day_event(f"doctor-offday-{date}", DOCTOR_OFF_DAY_TITLE,
                          EventType.OFFDAY, UserRole.DOCTOR, date)


def on_call_day_to_event(date: str) -> ScheduleEvent:
    return _all_day_event(f"doctor-oncall-{date}", ON_CALL_TITLE,
                          EventType.ONCALL, UserRole.DOCTOR, date)


def build_schedule_events(collections: ScheduleCollections) -> Dict[str, List[ScheduleEvent]]:
    """
    Построить отображение дата -> список унифицированных событий.

    Порядок источников фиксирован: занятия, выходные учителя, смены,
    выходные врача, дежурства. Внутри источника сохраняется порядок
    коллекции. Дубликаты между источниками не убираются.

    Args:
        collections: Пять исходных коллекций

    Returns:
        Словарь {дата: [ScheduleEvent, ...]}; даты без событий отсутствуют
    """
    events: Dict[str, List[ScheduleEvent]] = defaultdict(list)

    for class_event in collections.classes:
        events[class_event.date].append(class_to_event(class_event))

    for date in collections.teacher_off_days:
        events[date].append(teacher_off_day_to_event(date))

    for shift in collections.shifts:
        events[shift.date].append(shift_to_event(shift))

    for date in collections.doctor_off_days:
        events[date].append(doctor_off_day_to_event(date))

    for date in collections.on_call_days:
        events[date].append(on_call_day_to_event(date))

    return dict(events)
