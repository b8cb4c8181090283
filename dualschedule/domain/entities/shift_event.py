"""Смена врача."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ShiftType(str, Enum):
    """Типы смен."""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    ONCALL = "oncall"


@dataclass
class ShiftEvent:
    """Смена в коллекции shifts."""

    id: str
    title: str
    start_time: str
    end_time: str
    location: str
    date: str  # YYYY-MM-DD
    type: ShiftType = ShiftType.MORNING

    def to_document(self) -> Dict[str, Any]:
        """Тело документа Firestore (без id)."""
        return {
            'title': self.title,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'location': self.location,
            'date': self.date,
            'type': self.type.value,
        }

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> 'ShiftEvent':
        raw_type = data.get('type', ShiftType.MORNING.value)
        try:
            shift_type = ShiftType(raw_type)
        except ValueError:
            # Неизвестный тип из старых документов считаем утренней сменой
            shift_type = ShiftType.MORNING
        return cls(
            id=doc_id,
            title=data.get('title', ''),
            start_time=data.get('startTime', ''),
            end_time=data.get('endTime', ''),
            location=data.get('location', ''),
            date=data.get('date', ''),
            type=shift_type,
        )
