"""Разметка дат общего календаря: точки и цвета по источникам."""

from typing import Dict, List, Optional

from dualschedule.domain.entities.shift_event import ShiftType
from dualschedule.shared.models.schedule_data import (
    CalendarDot,
    DateMarking,
    EventType,
    RoleFilter,
    ScheduleEvent,
    UserRole,
)

TEACHER_CLASS_COLOR = "#5B8E7D"
TEACHER_OFF_DAY_COLOR = "#FF6B6B"
DOCTOR_ON_CALL_COLOR = "#4D96FF"
DOCTOR_OFF_DAY_COLOR = "#FF8C94"
DEFAULT_SHIFT_COLOR = "#F4845F"

SHIFT_TYPE_COLORS = {
    ShiftType.MORNING: "#F4845F",
    ShiftType.AFTERNOON: "#E9C46A",
    ShiftType.NIGHT: "#5E60CE",
    ShiftType.ONCALL: DOCTOR_ON_CALL_COLOR,
}

SHIFT_TYPE_NAMES = {
    ShiftType.MORNING: "Morning Shift",
    ShiftType.AFTERNOON: "Afternoon Shift",
    ShiftType.NIGHT: "Night Shift",
    ShiftType.ONCALL: "On-Call Duty",
}


def get_shift_type_color(shift_type: Optional[ShiftType]) -> str:
    return SHIFT_TYPE_COLORS.get(shift_type, DEFAULT_SHIFT_COLOR)


def get_shift_type_name(shift_type: Optional[ShiftType]) -> str:
    return SHIFT_TYPE_NAMES.get(shift_type, "Shift")


def get_event_color(event: ScheduleEvent) -> str:
    """Цвет карточки события в списке дня."""
    if event.user == UserRole.TEACHER:
        return TEACHER_CLASS_COLOR
    if event.type == EventType.ONCALL:
        return DOCTOR_ON_CALL_COLOR
    if event.type == EventType.OFFDAY:
        return TEACHER_OFF_DAY_COLOR
    if event.type == EventType.SHIFT and event.shift_type:
        return get_shift_type_color(event.shift_type)
    return DEFAULT_SHIFT_COLOR


def filter_events(events: List[ScheduleEvent], role_filter: RoleFilter = RoleFilter.ALL) -> List[ScheduleEvent]:
    if role_filter == RoleFilter.ALL:
        return list(events)
    return [e for e in events if e.user.value == role_filter.value]


def get_events_for_date(
    events: Dict[str, List[ScheduleEvent]],
    date: str,
    role_filter: RoleFilter = RoleFilter.ALL,
) -> List[ScheduleEvent]:
    """События выбранного дня с учетом фильтра по роли."""
    return filter_events(events.get(date, []), role_filter)


def _has(events: List[ScheduleEvent], user: UserRole, event_type: EventType) -> bool:
    return any(e.user == user and e.type == event_type for e in events)


def build_date_dots(events: List[ScheduleEvent]) -> List[CalendarDot]:
    """
    Точки для одной даты.

    Порядок: занятие учителя (одна точка), выходной учителя, по точке на каждую
    смену врача цветом ее типа, дежурство, выходной врача.
    """
    dots: List[CalendarDot] = []

    if _has(events, UserRole.TEACHER, EventType.CLASS):
        dots.append(CalendarDot(key="teacher-class", color=TEACHER_CLASS_COLOR))

    if _has(events, UserRole.TEACHER, EventType.OFFDAY):
        dots.append(CalendarDot(key="teacher-offday", color=TEACHER_OFF_DAY_COLOR))

    for event in events:
        if event.user == UserRole.DOCTOR and event.type == EventType.SHIFT and event.shift_type:
            dots.append(CalendarDot(
                key=f"doctor-shift-{event.shift_type.value}",
                color=get_shift_type_color(event.shift_type),
            ))

    if _has(events, UserRole.DOCTOR, EventType.ONCALL):
        dots.append(CalendarDot(key="doctor-oncall", color=DOCTOR_ON_CALL_COLOR))

    if _has(events, UserRole.DOCTOR, EventType.OFFDAY):
        dots.append(CalendarDot(key="doctor-offday", color=DOCTOR_OFF_DAY_COLOR))

    return dots


def build_marked_dates(
    events: Dict[str, List[ScheduleEvent]],
    selected_date: str,
    role_filter: RoleFilter = RoleFilter.ALL,
) -> Dict[str, DateMarking]:
    """
    Разметка всех дат календаря.

    Даты, где после фильтрации не осталось событий, пропускаются.
    Выбранная дата присутствует всегда.
    """
    marked: Dict[str, DateMarking] = {}

    for date, date_events in events.items():
        filtered = filter_events(date_events, role_filter)
        if not filtered:
            continue
        marked[date] = DateMarking(
            marked=True,
            dots=build_date_dots(filtered),
            selected=date == selected_date,
        )

    if selected_date not in marked:
        marked[selected_date] = DateMarking(selected=True)

    return marked
