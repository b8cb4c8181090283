"""Тесты схем создания занятий и смен."""

import pytest
from pydantic import ValidationError

from dualschedule.domain.entities.shift_event import ShiftType
from dualschedule.shared.models.schedule_schemas import ClassCreate, ShiftCreate


class TestScheduleSchemas:
    """Тесты валидации входных данных."""

    def test_class_create_defaults(self):
        data = ClassCreate(title="Math", start_time="09:00", end_time="10:00", date="2024-05-01")

        entity = data.to_entity("c1")
        assert entity.id == "c1"
        assert entity.location == ""

    @pytest.mark.parametrize("field_name", ["title", "start_time", "end_time"])
    def test_required_fields_cannot_be_blank(self, field_name):
        payload = {"title": "Math", "start_time": "09:00", "end_time": "10:00", "date": "2024-05-01"}
        payload[field_name] = "   "

        with pytest.raises(ValidationError, match="Please fill in all required fields"):
            ClassCreate(**payload)

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            ShiftCreate(title="Night", start_time="22:00", date="2024-05-01")

    @pytest.mark.parametrize("bad_date", ["2024-13-01", "01.05.2024", ""])
    def test_invalid_date(self, bad_date):
        with pytest.raises(ValidationError):
            ClassCreate(title="Math", start_time="09:00", end_time="10:00", date=bad_date)

    def test_shift_type_default_and_parse(self):
        default = ShiftCreate(title="A", start_time="08:00", end_time="16:00", date="2024-05-01")
        night = ShiftCreate(title="B", start_time="22:00", end_time="06:00", date="2024-05-01", type="night")

        assert default.type == ShiftType.MORNING
        assert night.to_entity("s1").type == ShiftType.NIGHT

    def test_unknown_shift_type_rejected(self):
        with pytest.raises(ValidationError):
            ShiftCreate(title="B", start_time="22:00", end_time="06:00", date="2024-05-01", type="weekend")
