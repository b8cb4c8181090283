#!/usr/bin/env python3
"""
Скрипт для заполнения Firestore примерными данными расписания.
"""

import asyncio
import sys

from dualschedule.core.config.settings import settings
from dualschedule.core.logging.logger import setup_logging
from dualschedule.shared.services.firestore_service import FirestoreService
from dualschedule.shared.services.sample_data_service import get_sample_data


async def seed_sample_data():
    """Запись примерного набора во все пять коллекций."""
    store = FirestoreService()
    data = get_sample_data()

    try:
        for class_event in data.classes:
            await store.put_class(class_event)
        for shift_event in data.shifts:
            await store.put_shift(shift_event)
        for date in data.teacher_off_days:
            await store.add_teacher_off_day(date)
        for date in data.doctor_off_days:
            await store.add_doctor_off_day(date)
        for date in data.on_call_days:
            await store.add_on_call_day(date)
        print("✅ Примерные данные записаны в Firestore")

    except Exception as e:
        print(f"❌ Ошибка записи примерных данных: {e}")
        sys.exit(1)


if __name__ == "__main__":
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    asyncio.run(seed_sample_data())
