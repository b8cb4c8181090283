"""Занятие учителя."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ClassEvent:
    """Занятие в коллекции classes."""

    id: str
    title: str
    start_time: str
    end_time: str
    location: str
    date: str  # YYYY-MM-DD

    def to_document(self) -> Dict[str, Any]:
        """Тело документа Firestore (без id)."""
        return {
            'title': self.title,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'location': self.location,
            'date': self.date,
        }

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> 'ClassEvent':
        return cls(
            id=doc_id,
            title=data.get('title', ''),
            start_time=data.get('startTime', ''),
            end_time=data.get('endTime', ''),
            location=data.get('location', ''),
            date=data.get('date', ''),
        )
