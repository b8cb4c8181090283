"""
Модуль управления состоянием расписания.
"""

from .schedule_state_manager import ScheduleStateManager, StateListener

__all__ = [
    'ScheduleStateManager',
    'StateListener',
]
