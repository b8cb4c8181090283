"""
Конфигурация pytest для тестов dualschedule
"""
from datetime import date
from unittest.mock import AsyncMock

import pytest

from dualschedule.core.state.schedule_state_manager import ScheduleStateManager
from dualschedule.shared.services.firestore_service import FirestoreService
from dualschedule.shared.services.schedule_sync_service import ScheduleSyncService
from tests.utils.test_helpers import MockFactory, TestDataFactory


@pytest.fixture
def today():
    """Фиксированная «сегодняшняя» дата"""
    return date(2024, 5, 1)


@pytest.fixture
def mock_firestore_client():
    """Мок пустого клиента Firestore"""
    return MockFactory.create_firestore_client()


@pytest.fixture
def mock_store():
    """Мок FirestoreService: все операции успешны, коллекции пустые"""
    store = AsyncMock(spec=FirestoreService)
    store.fetch_classes.return_value = []
    store.fetch_shifts.return_value = []
    store.fetch_teacher_off_days.return_value = []
    store.fetch_doctor_off_days.return_value = []
    store.fetch_on_call_days.return_value = []
    store.add_class.return_value = "new-class-id"
    store.add_shift.return_value = "new-shift-id"
    return store


@pytest.fixture
def state_manager(mock_store):
    """Менеджер состояния поверх мока хранилища"""
    sync_service = ScheduleSyncService(mock_store, use_sample_data_on_error=True)
    return ScheduleStateManager(mock_store, sync_service=sync_service)


@pytest.fixture
def sample_class():
    return TestDataFactory.create_class()


@pytest.fixture
def sample_shift():
    return TestDataFactory.create_shift()
