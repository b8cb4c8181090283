"""Встроенный набор примерных данных на случай недоступности Firestore."""

from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from dualschedule.core.config.settings import settings
from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent, ShiftType
from dualschedule.shared.models.schedule_data import ScheduleCollections


def local_today(timezone_name: Optional[str] = None) -> date:
    """Текущая дата в часовом поясе из настроек."""
    tz = pytz.timezone(timezone_name or settings.default_timezone)
    return datetime.now(tz).date()


def get_sample_data(today: Optional[date] = None) -> ScheduleCollections:
    """
    Примерные данные относительно сегодняшней даты.

    Каждый вызов возвращает новые списки, так что их можно менять.
    """
    if today is None:
        today = local_today()

    today_str = today.isoformat()
    tomorrow_str = (today + timedelta(days=1)).isoformat()
    day_after_tomorrow_str = (today + timedelta(days=2)).isoformat()

    return ScheduleCollections(
        classes=[
            ClassEvent(
                id='sample-class-1',
                title='Math 101',
                start_time='09:00',
                end_time='10:30',
                location='Room A101',
                date=today_str,
            ),
            ClassEvent(
                id='sample-class-2',
                title='English Literature',
                start_time='13:00',
                end_time='14:30',
                location='Room B202',
                date=tomorrow_str,
            ),
        ],
        shifts=[
            ShiftEvent(
                id='sample-shift-1',
                title='Morning Shift',
                start_time='08:00',
                end_time='16:00',
                location='General Ward',
                date=today_str,
                type=ShiftType.MORNING,
            ),
            ShiftEvent(
                id='sample-shift-2',
                title='Night Shift',
                start_time='22:00',
                end_time='06:00',
                location='Emergency Room',
                date=tomorrow_str,
                type=ShiftType.NIGHT,
            ),
        ],
        teacher_off_days=[day_after_tomorrow_str],
        doctor_off_days=[day_after_tomorrow_str],
        on_call_days=[tomorrow_str],
    )
