"""Сервис начальной загрузки расписания из Firestore."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from dualschedule.core.config.settings import settings
from dualschedule.core.logging.logger import logger
from dualschedule.shared.models.schedule_data import ScheduleCollections
from dualschedule.shared.services.firestore_service import FirestoreService
from dualschedule.shared.services.sample_data_service import get_sample_data

PERMISSION_ERROR_MARKER = "Missing or insufficient permissions"

PERMISSION_HINT = (
    "Firestore permission errors detected. "
    "Check the security rules for the schedule collections."
)


def is_permission_error(error: BaseException) -> bool:
    """Ошибка прав доступа определяется по тексту сообщения."""
    return PERMISSION_ERROR_MARKER in str(error)


@dataclass
class SyncResult:
    """Результат загрузки коллекций."""

    collections: ScheduleCollections
    failed_collections: List[str] = field(default_factory=list)
    permission_error: bool = False
    used_sample_data: bool = False

    @property
    def has_errors(self) -> bool:
        return bool(self.failed_collections)


class ScheduleSyncService:
    """
    Загрузка пяти коллекций с откатом на примерные данные.

    Каждая коллекция запрашивается независимо: ошибка в одной не мешает
    получить остальные. Если упала хотя бы одна, ВСЕ пять коллекций
    заменяются примерным набором (use_sample_data_on_error=True) либо
    упавшие остаются пустыми (use_sample_data_on_error=False).
    """

    def __init__(self, store: FirestoreService, use_sample_data_on_error: Optional[bool] = None):
        self.store = store
        if use_sample_data_on_error is None:
            use_sample_data_on_error = settings.use_sample_data_on_error
        self.use_sample_data_on_error = use_sample_data_on_error

    async def load(self, today: Optional[date] = None) -> SyncResult:
        fetchers = {
            "classes": self.store.fetch_classes,
            "shifts": self.store.fetch_shifts,
            "teacher_off_days": self.store.fetch_teacher_off_days,
            "doctor_off_days": self.store.fetch_doctor_off_days,
            "on_call_days": self.store.fetch_on_call_days,
        }

        results = await asyncio.gather(
            *(fetch() for fetch in fetchers.values()),
            return_exceptions=True,
        )

        collections = ScheduleCollections()
        result = SyncResult(collections=collections)

        for name, outcome in zip(fetchers, results):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning(f"Collection {name} unavailable: {outcome}", collection=name)
                result.failed_collections.append(name)
                if is_permission_error(outcome):
                    result.permission_error = True
                # Упавшая коллекция временно пустая
                setattr(collections, name, [])
            else:
                setattr(collections, name, list(outcome))

        if result.permission_error:
            logger.warning(PERMISSION_HINT)

        if result.has_errors and self.use_sample_data_on_error:
            logger.info(
                "Using sample data due to Firestore errors",
                failed_collections=",".join(result.failed_collections),
            )
            result.collections = get_sample_data(today)
            result.used_sample_data = True

        logger.info(
            f"Schedule loaded: {len(result.collections.classes)} classes, "
            f"{len(result.collections.shifts)} shifts, "
            f"{len(result.collections.teacher_off_days)} teacher off days, "
            f"{len(result.collections.doctor_off_days)} doctor off days, "
            f"{len(result.collections.on_call_days)} on-call days"
        )
        return result
