"""Сервис доступа к коллекциям расписания в Firestore."""

from typing import Any, Dict, List, Optional

from google.cloud.firestore import AsyncClient

from dualschedule.core.config.settings import settings
from dualschedule.core.firestore.connection import get_firestore
from dualschedule.core.logging.logger import logger
from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent
from dualschedule.shared.models.schedule_schemas import ClassCreate, ShiftCreate


class FirestoreService:
    """
    CRUD по пяти коллекциям расписания.

    Занятия и смены хранятся под сгенерированными id. Выходные и дежурства
    хранятся под id, равным самой дате, с телом {"date": date}, поэтому
    повторная запись той же даты ничего не меняет.

    Любая ошибка Firestore логируется и пробрасывается вызывающему.
    """

    def __init__(self, client: Optional[AsyncClient] = None):
        self._client = client

    def _get_db(self) -> AsyncClient:
        if self._client is None:
            # get_firestore() поднимает StoreNotInitializedError, если клиент не создан
            self._client = get_firestore()
        return self._client

    # --- общие операции ---

    async def _fetch_documents(self, collection_name: str) -> List[Any]:
        db = self._get_db()
        return await db.collection(collection_name).get()

    async def _add_document(self, collection_name: str, data: Dict[str, Any]) -> str:
        db = self._get_db()
        _, doc_ref = await db.collection(collection_name).add(data)
        return doc_ref.id

    async def _set_document(self, collection_name: str, doc_id: str, data: Dict[str, Any]) -> None:
        db = self._get_db()
        await db.collection(collection_name).document(doc_id).set(data)

    async def _delete_document(self, collection_name: str, doc_id: str) -> None:
        db = self._get_db()
        await db.collection(collection_name).document(doc_id).delete()

    async def _fetch_day_ids(self, collection_name: str, label: str) -> List[str]:
        try:
            snapshot = await self._fetch_documents(collection_name)
            return [doc.id for doc in snapshot]
        except Exception as e:
            logger.error(f"Error fetching {label}: {e}", collection=collection_name)
            raise

    async def _add_day(self, collection_name: str, date: str, label: str) -> None:
        try:
            await self._set_document(collection_name, date, {'date': date})
        except Exception as e:
            logger.error(f"Error adding {label}: {e}", collection=collection_name, date=date)
            raise

    async def _delete_day(self, collection_name: str, date: str, label: str) -> None:
        try:
            await self._delete_document(collection_name, date)
        except Exception as e:
            logger.error(f"Error deleting {label}: {e}", collection=collection_name, date=date)
            raise

    # --- занятия ---

    async def fetch_classes(self) -> List[ClassEvent]:
        try:
            snapshot = await self._fetch_documents(settings.classes_collection)
            return [ClassEvent.from_document(doc.id, doc.to_dict() or {}) for doc in snapshot]
        except Exception as e:
            logger.error(f"Error fetching classes: {e}")
            raise

    async def add_class(self, class_data: ClassCreate) -> str:
        """Создает занятие и возвращает сгенерированный id."""
        try:
            entity = class_data.to_entity(doc_id="")
            return await self._add_document(settings.classes_collection, entity.to_document())
        except Exception as e:
            logger.error(f"Error adding class: {e}")
            raise

    async def put_class(self, class_event: ClassEvent) -> None:
        """Записывает занятие под его собственным id."""
        try:
            await self._set_document(
                settings.classes_collection, class_event.id, class_event.to_document()
            )
        except Exception as e:
            logger.error(f"Error writing class {class_event.id}: {e}")
            raise

    async def delete_class(self, class_id: str) -> None:
        try:
            await self._delete_document(settings.classes_collection, class_id)
        except Exception as e:
            logger.error(f"Error deleting class: {e}", class_id=class_id)
            raise

    # --- смены ---

    async def fetch_shifts(self) -> List[ShiftEvent]:
        try:
            snapshot = await self._fetch_documents(settings.shifts_collection)
            return [ShiftEvent.from_document(doc.id, doc.to_dict() or {}) for doc in snapshot]
        except Exception as e:
            logger.error(f"Error fetching shifts: {e}")
            raise

    async def add_shift(self, shift_data: ShiftCreate) -> str:
        """Создает смену и возвращает сгенерированный id."""
        try:
            entity = shift_data.to_entity(doc_id="")
            return await self._add_document(settings.shifts_collection, entity.to_document())
        except Exception as e:
            logger.error(f"Error adding shift: {e}")
            raise

    async def put_shift(self, shift_event: ShiftEvent) -> None:
        """Записывает смену под ее собственным id."""
        try:
            await self._set_document(
                settings.shifts_collection, shift_event.id, shift_event.to_document()
            )
        except Exception as e:
            logger.error(f"Error writing shift {shift_event.id}: {e}")
            raise

    async def delete_shift(self, shift_id: str) -> None:
        try:
            await self._delete_document(settings.shifts_collection, shift_id)
        except Exception as e:
            logger.error(f"Error deleting shift: {e}", shift_id=shift_id)
            raise

    def shift_document_path(self, shift_id: str) -> str:
        return f"{settings.shifts_collection}/{shift_id}"

    # --- выходные учителя ---

    async def fetch_teacher_off_days(self) -> List[str]:
        return await self._fetch_day_ids(settings.teacher_off_days_collection, "teacher off days")

    async def add_teacher_off_day(self, date: str) -> None:
        await self._add_day(settings.teacher_off_days_collection, date, "teacher off day")

    async def delete_teacher_off_day(self, date: str) -> None:
        await self._delete_day(settings.teacher_off_days_collection, date, "teacher off day")

    # --- выходные врача ---

    async def fetch_doctor_off_days(self) -> List[str]:
        return await self._fetch_day_ids(settings.doctor_off_days_collection, "doctor off days")

    async def add_doctor_off_day(self, date: str) -> None:
        await self._add_day(settings.doctor_off_days_collection, date, "doctor off day")

    async def delete_doctor_off_day(self, date: str) -> None:
        await self._delete_day(settings.doctor_off_days_collection, date, "doctor off day")

    # --- дежурства ---

    async def fetch_on_call_days(self) -> List[str]:
        return await self._fetch_day_ids(settings.on_call_days_collection, "on-call days")

    async def add_on_call_day(self, date: str) -> None:
        await self._add_day(settings.on_call_days_collection, date, "on-call day")

    async def delete_on_call_day(self, date: str) -> None:
        await self._delete_day(settings.on_call_days_collection, date, "on-call day")
