"""Тесты сервиса доступа к Firestore."""

from unittest.mock import patch

import pytest

from dualschedule.core.exceptions import StoreNotInitializedError
from dualschedule.domain.entities.shift_event import ShiftType
from dualschedule.shared.models.schedule_schemas import ClassCreate, ShiftCreate
from dualschedule.shared.services.firestore_service import FirestoreService
from tests.utils.test_helpers import MockFactory, TestDataFactory


class TestFirestoreService:
    """Тесты для FirestoreService."""

    @pytest.mark.asyncio
    async def test_fetch_classes_maps_documents(self):
        client = MockFactory.create_firestore_client({
            "classes": [
                MockFactory.create_snapshot("c1", {
                    "title": "Math 101",
                    "startTime": "09:00",
                    "endTime": "10:30",
                    "location": "Room A101",
                    "date": "2024-05-01",
                }),
            ],
        })
        service = FirestoreService(client)

        classes = await service.fetch_classes()

        assert classes == [TestDataFactory.create_class(id="c1")]
        client.collection.assert_called_with("classes")

    @pytest.mark.asyncio
    async def test_fetch_shifts_maps_type(self):
        client = MockFactory.create_firestore_client({
            "shifts": [
                MockFactory.create_snapshot("s1", {
                    "title": "Night Shift",
                    "startTime": "22:00",
                    "endTime": "06:00",
                    "location": "Emergency Room",
                    "date": "2024-05-02",
                    "type": "night",
                }),
                MockFactory.create_snapshot("s2", {"title": "Legacy", "type": "weekend"}),
            ],
        })

        shifts = await FirestoreService(client).fetch_shifts()

        assert shifts[0].type == ShiftType.NIGHT
        assert shifts[0].location == "Emergency Room"
        assert shifts[1].type == ShiftType.MORNING

    @pytest.mark.asyncio
    async def test_fetch_day_collections_use_document_ids(self):
        client = MockFactory.create_firestore_client({
            "teacherOffDays": [MockFactory.create_snapshot("2024-05-03", {"date": "2024-05-03"})],
            "doctorOffDays": [MockFactory.create_snapshot("2024-05-04", None)],
            "onCallDays": [
                MockFactory.create_snapshot("2024-05-02", {"date": "2024-05-02"}),
                MockFactory.create_snapshot("2024-05-09", {"date": "2024-05-09"}),
            ],
        })
        service = FirestoreService(client)

        assert await service.fetch_teacher_off_days() == ["2024-05-03"]
        assert await service.fetch_doctor_off_days() == ["2024-05-04"]
        assert await service.fetch_on_call_days() == ["2024-05-02", "2024-05-09"]

    @pytest.mark.asyncio
    async def test_add_class_returns_generated_id(self):
        client = MockFactory.create_firestore_client(new_doc_id="abc123")
        data = ClassCreate(title="Math", start_time="09:00", end_time="10:00", date="2024-05-01")

        class_id = await FirestoreService(client).add_class(data)

        assert class_id == "abc123"
        client.collection("classes").add.assert_awaited_once_with({
            "title": "Math",
            "startTime": "09:00",
            "endTime": "10:00",
            "location": "",
            "date": "2024-05-01",
        })

    @pytest.mark.asyncio
    async def test_add_shift_writes_type(self):
        client = MockFactory.create_firestore_client(new_doc_id="s-new")
        data = ShiftCreate(title="Night", start_time="22:00", end_time="06:00",
                           date="2024-05-01", type=ShiftType.NIGHT)

        assert await FirestoreService(client).add_shift(data) == "s-new"
        written = client.collection("shifts").add.await_args.args[0]
        assert written["type"] == "night"

    @pytest.mark.asyncio
    async def test_day_documents_are_keyed_by_date(self):
        client = MockFactory.create_firestore_client()
        service = FirestoreService(client)

        await service.add_on_call_day("2024-05-02")
        await service.delete_doctor_off_day("2024-05-04")

        on_call = client.collection("onCallDays")
        on_call.document.assert_called_with("2024-05-02")
        on_call.document.return_value.set.assert_awaited_once_with({"date": "2024-05-02"})
        doctor_off = client.collection("doctorOffDays")
        doctor_off.document.assert_called_with("2024-05-04")
        doctor_off.document.return_value.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_shift(self):
        client = MockFactory.create_firestore_client()

        await FirestoreService(client).delete_shift("s1")

        client.collection("shifts").document.assert_called_with("s1")
        client.collection("shifts").document.return_value.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_put_class_uses_own_id(self, sample_class):
        client = MockFactory.create_firestore_client()

        await FirestoreService(client).put_class(sample_class)

        client.collection("classes").document.assert_called_with("class-1")
        client.collection("classes").document.return_value.set.assert_awaited_once_with(
            sample_class.to_document()
        )

    @pytest.mark.asyncio
    async def test_errors_are_logged_and_reraised(self, caplog):
        client = MockFactory.create_firestore_client()
        client.collection("teacherOffDays").document.return_value.set.side_effect = RuntimeError("denied")

        with pytest.raises(RuntimeError, match="denied"):
            await FirestoreService(client).add_teacher_off_day("2024-05-01")

        assert "Error adding teacher off day" in caplog.text

    @pytest.mark.asyncio
    async def test_uninitialized_store_raises(self):
        with patch(
            "dualschedule.shared.services.firestore_service.get_firestore",
            side_effect=StoreNotInitializedError(),
        ):
            with pytest.raises(StoreNotInitializedError, match="Firestore is not initialized"):
                await FirestoreService().fetch_classes()

    def test_shift_document_path(self):
        assert FirestoreService(MockFactory.create_firestore_client()).shift_document_path("x") == "shifts/x"
