"""Tests for data models."""

from datetime import date, datetime

import pytest

from studio_planner.models import (
    Anchor,
    ClassDefinition,
    Movement,
    PrecautionLevel,
    RecurrencePattern,
    Recurring,
    Schedule,
    Template,
    ValidationError,
)
from studio_planner.models.movements import SEED_MOVEMENTS


class TestMovement:
    """Tests for Movement model."""

    def test_movement_to_dict(self):
        """Test movement serialization uses camelCase keys and sorted sets."""
        movement = Movement(
            id="m1",
            name="Elephant",
            category="Spinal Articulation",
            level="Intermediate",
            precaution_level=PrecautionLevel.MODERATE,
            equipment={"Reformer", "Box"},
            muscle_groups={"hamstrings", "abdominals"},
            breathing_pattern="Exhale to lift",
        )
        data = movement.to_dict()

        assert data["id"] == "m1"
        assert data["precautionLevel"] == "Moderate"
        assert data["equipment"] == ["Box", "Reformer"]
        assert data["muscleGroups"] == ["abdominals", "hamstrings"]
        assert data["breathingPattern"] == "Exhale to lift"
        assert data["isCatalogSeed"] is False

    def test_movement_from_dict(self):
        """Test movement deserialization."""
        movement = Movement.from_dict(
            {
                "name": "Rowing Series",
                "category": "Arms",
                "level": "Intermediate",
                "precautionLevel": "high",
                "instructions": ["Sit tall", "Round back"],
                "tags": ["arms"],
            }
        )

        assert movement.name == "Rowing Series"
        assert movement.precaution_level == PrecautionLevel.HIGH
        assert movement.is_high_risk
        assert movement.instructions == ["Sit tall", "Round back"]
        assert movement.tags == {"arms"}

    def test_movement_requires_name(self):
        """Test a blank name is rejected with the field named."""
        with pytest.raises(ValidationError) as exc:
            Movement.from_dict({"name": "  ", "category": "Arms", "level": "Beginner"})
        assert exc.value.field == "name"

    def test_unknown_precaution_level(self):
        """Test unknown precaution levels are rejected."""
        with pytest.raises(ValidationError) as exc:
            PrecautionLevel.parse("Extreme")
        assert exc.value.field == "precautionLevel"

    def test_apply_update_keeps_seed_flag(self):
        """Test partial updates cannot change id or seed flag."""
        movement = Movement(
            id="m1", name="The Hundred", category="Warm-up", level="All Levels", is_catalog_seed=True
        )
        updated = movement.apply_update(
            {"id": "other", "isCatalogSeed": False, "description": "Pump the arms"}
        )

        assert updated.id == "m1"
        assert updated.is_catalog_seed is True
        assert updated.description == "Pump the arms"
        assert updated.name == "The Hundred"

    def test_seed_movements(self):
        """Test the bundled repertoire is flagged as catalog seed."""
        assert len(SEED_MOVEMENTS) == 10
        assert all(m.is_catalog_seed for m in SEED_MOVEMENTS)
        assert len({m.name for m in SEED_MOVEMENTS}) == 10
        assert any(m.is_high_risk for m in SEED_MOVEMENTS)


class TestSchedule:
    """Tests for Anchor, Recurring and Schedule."""

    def test_anchor_from_bounds(self):
        """Test duration is derived from start and end."""
        anchor = Anchor.from_bounds(datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 9, 50))
        assert anchor.duration_minutes == 50
        assert anchor.end == datetime(2024, 3, 4, 9, 50)

    def test_anchor_rejects_non_positive_duration(self):
        """Test zero-length classes are rejected."""
        with pytest.raises(ValidationError):
            Anchor(start=datetime(2024, 3, 4, 9, 0), duration_minutes=0)

    def test_recurring_requires_days(self):
        """Test an empty day set is rejected at construction."""
        with pytest.raises(ValidationError) as exc:
            Recurring(days_of_week=frozenset())
        assert exc.value.field == "recurrenceDays"

    def test_recurring_rejects_bad_weekday(self):
        """Test weekdays outside 0..6 are rejected."""
        with pytest.raises(ValidationError):
            Recurring(days_of_week=frozenset({7}))

    def test_end_date_before_anchor(self):
        """Test an end date before the first class is rejected."""
        with pytest.raises(ValidationError) as exc:
            Schedule(
                anchor=Anchor(start=datetime(2024, 3, 4, 9, 0), duration_minutes=60),
                recurrence=Recurring(days_of_week=frozenset({1}), end_date=date(2024, 3, 3)),
            )
        assert exc.value.field == "recurrenceEndDate"

    def test_end_date_on_anchor_day_allowed(self):
        """Test an end date equal to the anchor date is valid."""
        schedule = Schedule(
            anchor=Anchor(start=datetime(2024, 3, 4, 9, 0), duration_minutes=60),
            recurrence=Recurring(days_of_week=frozenset({1}), end_date=date(2024, 3, 4)),
        )
        assert schedule.is_recurring

    def test_from_dict_iso_with_end(self):
        """Test ISO start and end instants."""
        schedule = Schedule.from_dict(
            {"startTime": "2024-03-04T09:00:00Z", "endTime": "2024-03-04T10:15:00Z"}
        )
        assert schedule.anchor.start == datetime(2024, 3, 4, 9, 0)
        assert schedule.anchor.duration_minutes == 75
        assert schedule.recurrence is None

    def test_from_dict_legacy_date_and_time(self):
        """Test the date + HH:MM + duration form."""
        schedule = Schedule.from_dict({"date": "2024-03-06", "startTime": "18:30", "duration": 45})
        assert schedule.anchor.start == datetime(2024, 3, 6, 18, 30)
        assert schedule.anchor.duration_minutes == 45

    def test_from_dict_recurring(self):
        """Test recurrence fields and the weekly default pattern."""
        schedule = Schedule.from_dict(
            {
                "startTime": "2024-03-04T09:00:00",
                "duration": 60,
                "isRecurring": True,
                "recurrenceDays": [1, 3],
                "recurrenceEndDate": "2024-04-01",
            }
        )
        rule = schedule.recurrence
        assert rule.pattern == RecurrencePattern.WEEKLY
        assert rule.days_of_week == frozenset({1, 3})
        assert rule.end_date == date(2024, 4, 1)
        assert rule.day_names == ["Mon", "Wed"]

    @pytest.mark.parametrize("pattern", [None, "", "none", "None"])
    def test_unset_pattern_defaults_to_weekly(self, pattern):
        """Test a recurring payload without a real pattern is weekly."""
        schedule = Schedule.from_dict(
            {
                "startTime": "2024-03-04T09:00:00",
                "duration": 60,
                "isRecurring": 1,
                "recurrencePattern": pattern,
                "recurrenceDays": [1],
            }
        )
        assert schedule.recurrence.pattern == RecurrencePattern.WEEKLY

    def test_unknown_pattern(self):
        """Test unknown patterns are rejected with the field named."""
        with pytest.raises(ValidationError) as exc:
            Schedule.from_dict(
                {
                    "startTime": "2024-03-04T09:00:00",
                    "duration": 60,
                    "isRecurring": True,
                    "recurrencePattern": "fortnightly",
                    "recurrenceDays": [1],
                }
            )
        assert exc.value.field == "recurrencePattern"

    def test_from_dict_missing_duration(self):
        """Test a schedule needs an end or a duration."""
        with pytest.raises(ValidationError):
            Schedule.from_dict({"startTime": "2024-03-04T09:00:00"})

    def test_from_dict_bad_instant(self):
        """Test unparseable instants name the field."""
        with pytest.raises(ValidationError) as exc:
            Schedule.from_dict({"startTime": "next monday", "duration": 60})
        assert exc.value.field == "startTime"

    def test_recurring_with_no_days_rejected(self):
        """Test isRecurring without days is a validation error."""
        with pytest.raises(ValidationError):
            Schedule.from_dict(
                {"startTime": "2024-03-04T09:00:00", "duration": 60, "isRecurring": True}
            )


class TestClassDefinition:
    """Tests for ClassDefinition model."""

    def test_round_trip(self, weekly_class):
        """Test to_dict/from_dict preserve schedule and sequence."""
        restored = ClassDefinition.from_dict(weekly_class.to_dict())

        assert restored.id == weekly_class.id
        assert restored.schedule == weekly_class.schedule
        assert restored.sequence.to_list() == weekly_class.sequence.to_list()
        assert restored.equipment == {"Reformer"}
        assert restored.max_participants == 8

    def test_to_dict_wire_keys(self, weekly_class):
        """Test the wire format keys."""
        data = weekly_class.to_dict()

        assert data["startTime"] == "2024-03-04T18:00:00"
        assert data["endTime"] == "2024-03-04T18:55:00"
        assert data["isRecurring"] is True
        assert data["recurrenceDays"] == [1, 3]
        assert data["roomLocation"] == "Studio A"
        assert data["sequence"] == ["m-hundred", "m-short-spine", "m-footwork"]

    def test_category_defaults_to_regular(self, class_payload):
        """Test missing category defaults to Regular."""
        class_def = ClassDefinition.from_dict(class_payload)
        assert class_def.category == "Regular"

    def test_missing_title(self, class_payload):
        """Test title is required."""
        del class_payload["title"]
        with pytest.raises(ValidationError) as exc:
            ClassDefinition.from_dict(class_payload)
        assert exc.value.field == "title"

    def test_max_participants_positive(self, class_payload):
        """Test max participants must be at least 1."""
        class_payload["maxParticipants"] = 0
        with pytest.raises(ValidationError):
            ClassDefinition.from_dict(class_payload)

    def test_update_start_keeps_duration(self, one_off_class):
        """Test moving a class keeps its length."""
        updated = one_off_class.apply_update({"startTime": "2024-03-05T11:00:00"})

        assert updated.start == datetime(2024, 3, 5, 11, 0)
        assert updated.duration_minutes == 60

    def test_update_date_keeps_time_of_day(self, one_off_class):
        """Test changing only the date keeps the start time."""
        updated = one_off_class.apply_update({"date": "2024-03-08"})
        assert updated.start == datetime(2024, 3, 8, 9, 0)
        assert updated.duration_minutes == 60

    def test_update_revalidates(self, weekly_class):
        """Test updates that break an invariant are rejected."""
        with pytest.raises(ValidationError):
            weekly_class.apply_update({"recurrenceDays": []})

    def test_update_can_stop_recurring(self, weekly_class):
        """Test turning a recurring class into a one-off."""
        updated = weekly_class.apply_update({"isRecurring": False})
        assert updated.schedule.recurrence is None
        assert updated.id == weekly_class.id


class TestTemplate:
    """Tests for Template model."""

    def test_round_trip(self, template):
        """Test template serialization uses the duration key."""
        data = template.to_dict()
        assert data["duration"] == 50
        restored = Template.from_dict(data)
        assert restored == template

    def test_default_duration(self):
        """Test templates default to an hour."""
        template = Template.from_dict({"name": "Quick", "level": "Beginner"})
        assert template.duration_minutes == 60

    def test_rejects_non_positive_duration(self):
        """Test zero-minute templates are rejected."""
        with pytest.raises(ValidationError) as exc:
            Template.from_dict({"name": "Quick", "level": "Beginner", "duration": 0})
        assert exc.value.field == "duration"
