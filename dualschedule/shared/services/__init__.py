"""
Сервисы dualschedule
"""

from .firestore_service import FirestoreService
from .schedule_aggregation_service import build_schedule_events
from .schedule_sync_service import ScheduleSyncService, SyncResult
from .sample_data_service import get_sample_data

__all__ = [
    "FirestoreService",
    "build_schedule_events",
    "ScheduleSyncService",
    "SyncResult",
    "get_sample_data",
]
