"""Tests for template instantiation, copying and saving as template."""

from datetime import date, datetime, time

from studio_planner.models import Sequence
from studio_planner.services.classes import (
    copy_class,
    instantiate_from_template,
    save_as_template,
    sequence_stats,
)

TODAY = date(2024, 5, 14)


class TestInstantiate:
    """Tests for instantiate_from_template."""

    def test_defaults(self, template):
        """Test a new one-off class today at 09:00 in Regular."""
        class_def = instantiate_from_template(template, today=TODAY)

        assert class_def.id and class_def.id != template.id
        assert class_def.title == "Beginner Reformer"
        assert class_def.level == "Beginner"
        assert class_def.category == "Regular"
        assert class_def.start == datetime(2024, 5, 14, 9, 0)
        assert class_def.duration_minutes == 50
        assert class_def.schedule.recurrence is None
        assert class_def.sequence.to_list() == ["m-footwork", "m-hundred"]

    def test_sequence_copied_by_value(self, template):
        """Test later edits on either side do not leak."""
        class_def = instantiate_from_template(template, today=TODAY)
        class_def.sequence.append("m-short-spine")
        template.sequence.remove_at(0)

        assert template.sequence.to_list() == ["m-hundred"]
        assert class_def.sequence.to_list() == ["m-footwork", "m-hundred", "m-short-spine"]

    def test_custom_start(self, template):
        """Test start time and category overrides."""
        class_def = instantiate_from_template(
            template, today=TODAY, start_time=time(17, 30), category="Workshop"
        )
        assert class_def.start == datetime(2024, 5, 14, 17, 30)
        assert class_def.category == "Workshop"


class TestCopy:
    """Tests for copy_class."""

    def test_copy_drops_recurrence(self, weekly_class):
        """Test copying a recurring class gives a one-off with a fresh id."""
        copied = copy_class(weekly_class, today=TODAY)

        assert copied.schedule.recurrence is None
        assert not copied.is_recurring
        assert copied.id != weekly_class.id
        assert weekly_class.is_recurring

    def test_copy_fields(self, weekly_class):
        """Test descriptive fields are copied and the title marked."""
        copied = copy_class(weekly_class, today=TODAY)

        assert copied.title == "Evening Flow (Copy)"
        assert copied.level == weekly_class.level
        assert copied.room_location == "Studio A"
        assert copied.max_participants == 8
        assert copied.equipment == {"Reformer"}
        assert copied.notes == "Bring socks"
        assert copied.description == weekly_class.description
        assert copied.start == datetime(2024, 5, 14, 18, 0)
        assert copied.duration_minutes == 55

    def test_copy_sequence_independent(self, weekly_class):
        """Test the copy's sequence is a separate list."""
        copied = copy_class(weekly_class, today=TODAY)
        copied.sequence.clear()
        assert len(weekly_class.sequence) == 3


class TestSaveAsTemplate:
    """Tests for save_as_template."""

    def test_defaults(self, weekly_class):
        """Test name, duration and reset tags."""
        template = save_as_template(weekly_class)

        assert template.name == "Evening Flow Template"
        assert template.duration_minutes == 55
        assert template.level == "Intermediate"
        assert template.tags == set()
        assert template.id and template.id != weekly_class.id
        assert template.created_at is not None

    def test_round_trip(self, template):
        """Test instantiate then save preserves sequence and level exactly."""
        class_def = instantiate_from_template(template, today=TODAY)
        saved = save_as_template(class_def)

        assert saved.sequence.to_list() == template.sequence.to_list()
        assert saved.level == template.level
        assert saved.duration_minutes == template.duration_minutes

    def test_custom_name(self, one_off_class):
        """Test an explicit name and description."""
        template = save_as_template(one_off_class, name="Basics", description="Intro")
        assert template.name == "Basics"
        assert template.description == "Intro"


class TestSequenceStats:
    """Tests for sequence_stats."""

    def test_minutes_per_movement_override(self, catalog):
        """Test the per-movement rate can be configured."""
        seq = Sequence(["m-hundred", "m-footwork", "m-short-spine"])
        assert sequence_stats(seq, catalog).estimated_minutes == 14
        assert sequence_stats(seq, catalog, minutes_per_movement=3).estimated_minutes == 9
