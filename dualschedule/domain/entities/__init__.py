"""
Модуль доменных сущностей dualschedule
"""

from .class_event import ClassEvent
from .shift_event import ShiftEvent, ShiftType

__all__ = ["ClassEvent", "ShiftEvent", "ShiftType"]
