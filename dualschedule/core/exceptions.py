"""Исключения dualschedule."""


class ScheduleError(Exception):
    """Базовая ошибка расписания."""


class StoreNotInitializedError(ScheduleError):
    """Клиент Firestore не инициализирован."""

    def __init__(self, message: str = "Firestore is not initialized"):
        super().__init__(message)
