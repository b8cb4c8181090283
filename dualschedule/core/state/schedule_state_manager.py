"""
Локальное состояние расписания: исходные коллекции, общий календарь и мутации.
"""

from datetime import date as date_type
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from dualschedule.core.logging.logger import logger
from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent
from dualschedule.shared.models.schedule_data import (
    DateMarking,
    RoleFilter,
    ScheduleCollections,
    ScheduleEvent,
)
from dualschedule.shared.models.schedule_schemas import (
    ClassCreate,
    ShiftCreate,
    validate_date_string,
)
from dualschedule.shared.services.calendar_marking_service import (
    build_marked_dates,
    get_events_for_date,
)
from dualschedule.shared.services.firestore_service import FirestoreService
from dualschedule.shared.services.sample_data_service import get_sample_data
from dualschedule.shared.services.schedule_aggregation_service import build_schedule_events
from dualschedule.shared.services.schedule_sync_service import ScheduleSyncService, SyncResult

StateListener = Callable[['ScheduleStateManager'], None]


class ScheduleStateManager:
    """
    Контейнер состояния расписания.

    Каждая мутация сначала дожидается записи в Firestore и только после
    успеха меняет локальные коллекции. При ошибке исключение пробрасывается,
    состояние не меняется. Общий календарь (events) пересчитывается при
    любом изменении коллекций, после чего синхронно вызываются подписчики.
    """

    def __init__(self, store: FirestoreService, sync_service: Optional[ScheduleSyncService] = None):
        self.store = store
        self.sync_service = sync_service or ScheduleSyncService(store)
        self.loading = False
        self._collections = ScheduleCollections()
        self._events: Dict[str, List[ScheduleEvent]] = {}
        self._listeners: List[StateListener] = []

    # --- чтение состояния ---

    @property
    def events(self) -> Dict[str, List[ScheduleEvent]]:
        """Копия общего календаря; меняется только через исходные коллекции."""
        return {date: list(day_events) for date, day_events in self._events.items()}

    @property
    def collections(self) -> ScheduleCollections:
        return self._collections.copy()

    @property
    def classes(self) -> List[ClassEvent]:
        return list(self._collections.classes)

    @property
    def shifts(self) -> List[ShiftEvent]:
        return list(self._collections.shifts)

    @property
    def teacher_off_days(self) -> List[str]:
        return list(self._collections.teacher_off_days)

    @property
    def doctor_off_days(self) -> List[str]:
        return list(self._collections.doctor_off_days)

    @property
    def on_call_days(self) -> List[str]:
        return list(self._collections.on_call_days)

    def get_classes_for_date(self, date: str) -> List[ClassEvent]:
        return [c for c in self._collections.classes if c.date == date]

    def get_shifts_for_date(self, date: str) -> List[ShiftEvent]:
        return [s for s in self._collections.shifts if s.date == date]

    def is_teacher_off_day(self, date: str) -> bool:
        return date in self._collections.teacher_off_days

    def is_doctor_off_day(self, date: str) -> bool:
        return date in self._collections.doctor_off_days

    def is_on_call_day(self, date: str) -> bool:
        return date in self._collections.on_call_days

    def get_events_for_date(self, date: str, role_filter: RoleFilter = RoleFilter.ALL) -> List[ScheduleEvent]:
        return get_events_for_date(self._events, date, role_filter)

    def get_marked_dates(self, selected_date: str,
                         role_filter: RoleFilter = RoleFilter.ALL) -> Dict[str, DateMarking]:
        return build_marked_dates(self._events, selected_date, role_filter)

    # --- подписки ---

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Подписка на изменения; возвращает функцию отписки."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_collections(self, collections: ScheduleCollections) -> None:
        self._collections = collections
        self._events = build_schedule_events(collections)
        for listener in list(self._listeners):
            listener(self)

    # --- инициализация ---

    async def initialize(self, today: Optional[date_type] = None) -> SyncResult:
        """Загрузка всех коллекций из Firestore (с откатом на примерные данные)."""
        self.loading = True
        try:
            try:
                result = await self.sync_service.load(today)
            except Exception as e:
                logger.error(f"Error fetching data: {e}")
                if not self.sync_service.use_sample_data_on_error:
                    raise
                result = SyncResult(
                    collections=get_sample_data(today),
                    failed_collections=["all"],
                    used_sample_data=True,
                )
            self._set_collections(result.collections)
            return result
        finally:
            self.loading = False

    # --- занятия учителя ---

    async def add_class_event(self, class_data: Union[ClassCreate, Mapping[str, Any]]) -> ClassEvent:
        if not isinstance(class_data, ClassCreate):
            class_data = ClassCreate.model_validate(class_data)
        try:
            class_id = await self.store.add_class(class_data)
        except Exception as e:
            logger.error(f"Error adding class: {e}")
            raise

        class_event = class_data.to_entity(class_id)
        collections = self._collections.copy()
        collections.classes.append(class_event)
        self._set_collections(collections)
        logger.info("Class added", class_id=class_id, date=class_event.date)
        return class_event

    async def remove_class_event(self, class_id: str) -> None:
        logger.debug(f"Removing class event with ID: {class_id}")
        try:
            await self.store.delete_class(class_id)
        except Exception as e:
            logger.error(f"Error removing class event with ID: {class_id}: {e}")
            raise

        collections = self._collections.copy()
        collections.classes = [c for c in collections.classes if c.id != class_id]
        self._set_collections(collections)

    async def toggle_teacher_off_day(self, date: str) -> bool:
        """Переключить выходной учителя; возвращает новое состояние."""
        return await self._toggle_day(
            "teacher_off_days", date,
            self.store.add_teacher_off_day, self.store.delete_teacher_off_day,
            "teacher off day",
        )

    # --- смены врача ---

    async def add_shift_event(self, shift_data: Union[ShiftCreate, Mapping[str, Any]]) -> ShiftEvent:
        if not isinstance(shift_data, ShiftCreate):
            shift_data = ShiftCreate.model_validate(shift_data)
        try:
            shift_id = await self.store.add_shift(shift_data)
        except Exception as e:
            logger.error(f"Error adding shift: {e}")
            raise

        shift_event = shift_data.to_entity(shift_id)
        collections = self._collections.copy()
        collections.shifts.append(shift_event)
        self._set_collections(collections)
        logger.info("Shift added", shift_id=shift_id, date=shift_event.date)
        return shift_event

    async def remove_shift_event(self, shift_id: str) -> None:
        logger.debug(f"Removing shift event with ID: {shift_id}")
        try:
            await self.store.delete_shift(shift_id)
        except Exception as e:
            logger.error(f"Error removing shift event with ID: {shift_id}: {e}")
            raise

        collections = self._collections.copy()
        collections.shifts = [s for s in collections.shifts if s.id != shift_id]
        self._set_collections(collections)

    async def toggle_doctor_off_day(self, date: str) -> bool:
        return await self._toggle_day(
            "doctor_off_days", date,
            self.store.add_doctor_off_day, self.store.delete_doctor_off_day,
            "doctor off day",
        )

    async def toggle_on_call_day(self, date: str) -> bool:
        return await self._toggle_day(
            "on_call_days", date,
            self.store.add_on_call_day, self.store.delete_on_call_day,
            "on-call day",
        )

    async def _toggle_day(self, field_name: str, date: str, add, delete, label: str) -> bool:
        # Дата становится id документа, поэтому проверяется до записи
        validate_date_string(date)
        current: List[str] = getattr(self._collections, field_name)
        is_set = date in current
        try:
            if is_set:
                await delete(date)
            else:
                await add(date)
        except Exception as e:
            logger.error(f"Error toggling {label}: {e}", date=date)
            raise

        collections = self._collections.copy()
        days: List[str] = getattr(collections, field_name)
        if is_set:
            setattr(collections, field_name, [d for d in days if d != date])
        else:
            days.append(date)
        self._set_collections(collections)
        logger.debug(f"Toggled {label}", date=date, enabled=not is_set)
        return not is_set
