"""
Утилиты и хелперы для тестов dualschedule
"""
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

from dualschedule.domain.entities.class_event import ClassEvent
from dualschedule.domain.entities.shift_event import ShiftEvent, ShiftType


class TestDataFactory:
    """Фабрика тестовых данных"""

    @staticmethod
    def create_class(
        id: str = "class-1",
        title: str = "Math 101",
        start_time: str = "09:00",
        end_time: str = "10:30",
        location: str = "Room A101",
        date: str = "2024-05-01",
    ) -> ClassEvent:
        return ClassEvent(
            id=id,
            title=title,
            start_time=start_time,
            end_time=end_time,
            location=location,
            date=date,
        )

    @staticmethod
    def create_shift(
        id: str = "shift-1",
        title: str = "Morning Shift",
        start_time: str = "08:00",
        end_time: str = "16:00",
        location: str = "General Ward",
        date: str = "2024-05-01",
        type: ShiftType = ShiftType.MORNING,
    ) -> ShiftEvent:
        return ShiftEvent(
            id=id,
            title=title,
            start_time=start_time,
            end_time=end_time,
            location=location,
            date=date,
            type=type,
        )


class MockFactory:
    """Фабрика моков Firestore"""

    @staticmethod
    def create_snapshot(doc_id: str, data: Optional[Dict[str, Any]] = None) -> MagicMock:
        """Мок DocumentSnapshot"""
        snapshot = MagicMock()
        snapshot.id = doc_id
        snapshot.to_dict.return_value = data
        return snapshot

    @staticmethod
    def create_firestore_client(
        documents: Optional[Dict[str, List[MagicMock]]] = None,
        new_doc_id: str = "generated-id",
    ) -> MagicMock:
        """
        Мок AsyncClient: collection(name) возвращает одну и ту же ссылку
        на коллекцию для одного имени, get/add/set/delete асинхронные.
        """
        documents = documents or {}
        refs: Dict[str, MagicMock] = {}

        def collection(name: str) -> MagicMock:
            if name not in refs:
                ref = MagicMock()
                ref.get = AsyncMock(return_value=documents.get(name, []))
                new_ref = MagicMock()
                new_ref.id = new_doc_id
                ref.add = AsyncMock(return_value=(None, new_ref))
                doc_ref = MagicMock()
                doc_ref.set = AsyncMock()
                doc_ref.delete = AsyncMock()
                ref.document = MagicMock(return_value=doc_ref)
                refs[name] = ref
            return refs[name]

        client = MagicMock()
        client.collection.side_effect = collection
        return client
