"""When a class happens: its anchor slot and optional weekly recurrence.

All datetimes are naive and read in the studio's single local timezone.
Weekdays follow the calendar-grid convention: 0 = Sunday ... 6 = Saturday.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

from .errors import ValidationError

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def day_of_week(day: date) -> int:
    """Weekday index with Sunday as 0."""
    return day.isoweekday() % 7


def parse_datetime(value: "str | datetime | date", field: str = "startTime") -> datetime:
    """Parse an ISO-8601 instant. Offsets are dropped; wall time is kept."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError(f"Invalid ISO-8601 datetime: {value!r}", field=field) from None
    return parsed.replace(tzinfo=None)


def parse_date(value: "str | datetime | date", field: str = "date") -> date:
    """Parse an ISO-8601 date, or take the calendar day of an instant."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return parse_datetime(text, field=field).date()


def parse_time(value: str, field: str = "startTime") -> time:
    """Parse a wall-clock time such as "09:00"."""
    try:
        return time.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid time of day: {value!r}", field=field) from None


class RecurrencePattern(str, Enum):
    """Recurrence patterns accepted on class definitions.

    MONTHLY is accepted but expands exactly like WEEKLY (days-of-week
    only); there is no day-of-month logic.
    """

    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: "str | RecurrencePattern | None") -> "RecurrencePattern":
        """Parse a pattern; blank or "none" means weekly."""
        if isinstance(value, cls):
            return value
        text = (value or "").strip().lower()
        if text in ("", "none"):
            return cls.WEEKLY
        try:
            return cls(text)
        except ValueError:
            raise ValidationError(
                f"Unknown recurrence pattern: {value!r}", field="recurrencePattern"
            ) from None


@dataclass(frozen=True)
class Anchor:
    """First occurrence of a class: start instant plus length in minutes."""

    start: datetime
    duration_minutes: int

    def __post_init__(self):
        if self.duration_minutes <= 0:
            raise ValidationError("Class duration must be positive", field="duration")

    @classmethod
    def from_bounds(cls, start: datetime, end: datetime) -> "Anchor":
        minutes = int((end - start).total_seconds() // 60)
        if minutes <= 0:
            raise ValidationError("Class must end after it starts", field="endTime")
        return cls(start=start, duration_minutes=minutes)

    @property
    def end(self) -> datetime:
        return self.start + self.duration

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)

    @property
    def date(self) -> date:
        return self.start.date()

    @property
    def time_of_day(self) -> time:
        return self.start.time()


@dataclass(frozen=True)
class Recurring:
    """Repeat on the given weekdays, optionally until an inclusive end date."""

    days_of_week: frozenset[int]
    pattern: RecurrencePattern = RecurrencePattern.WEEKLY
    end_date: date | None = None

    def __post_init__(self):
        object.__setattr__(self, "days_of_week", frozenset(self.days_of_week))
        if not self.days_of_week:
            raise ValidationError(
                "Recurring classes need at least one day of the week",
                field="recurrenceDays",
            )
        for day in self.days_of_week:
            if not isinstance(day, int) or not 0 <= day <= 6:
                raise ValidationError(
                    f"Day of week must be 0-6, got {day!r}", field="recurrenceDays"
                )
        if isinstance(self.end_date, datetime):
            object.__setattr__(self, "end_date", self.end_date.date())

    @property
    def day_names(self) -> list[str]:
        return [WEEKDAY_NAMES[d] for d in sorted(self.days_of_week)]


# A class either happens once (None) or recurs
RecurrenceRule = Recurring | None


@dataclass(frozen=True)
class Schedule:
    """Anchor slot plus recurrence rule."""

    anchor: Anchor
    recurrence: RecurrenceRule = None

    def __post_init__(self):
        rule = self.recurrence
        if rule is not None and rule.end_date is not None and rule.end_date < self.anchor.date:
            raise ValidationError(
                "Recurrence end date is before the first class",
                field="recurrenceEndDate",
            )

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not None

    def to_dict(self) -> dict:
        """Convert to wire fields (merged into the class payload)."""
        rule = self.recurrence
        return {
            "startTime": self.anchor.start.isoformat(),
            "endTime": self.anchor.end.isoformat(),
            "duration": self.anchor.duration_minutes,
            "isRecurring": rule is not None,
            "recurrencePattern": rule.pattern.value if rule else None,
            "recurrenceDays": sorted(rule.days_of_week) if rule else [],
            "recurrenceEndDate": rule.end_date.isoformat() if rule and rule.end_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Schedule":
        """Parse wire fields.

        Accepts an ISO `startTime` with `endTime` or `duration`, or the
        older form of `date` (YYYY-MM-DD) + `startTime` (HH:MM) + `duration`.
        """
        raw_start = data.get("startTime")
        if not raw_start:
            raise ValidationError("'startTime' is required", field="startTime")
        if data.get("date") and isinstance(raw_start, str) and "T" not in raw_start:
            start = datetime.combine(
                parse_date(data["date"]), parse_time(str(raw_start))
            )
        else:
            start = parse_datetime(raw_start)

        raw_end = data.get("endTime")
        if raw_end:
            if isinstance(raw_end, datetime) or "T" in str(raw_end):
                end = parse_datetime(raw_end, field="endTime")
            else:
                end = datetime.combine(start.date(), parse_time(str(raw_end), field="endTime"))
            anchor = Anchor.from_bounds(start, end)
        elif data.get("duration") is not None:
            try:
                minutes = int(data["duration"])
            except (TypeError, ValueError):
                raise ValidationError("Duration must be whole minutes", field="duration") from None
            anchor = Anchor(start=start, duration_minutes=minutes)
        else:
            raise ValidationError("'endTime' or 'duration' is required", field="endTime")

        recurrence = None
        if data.get("isRecurring"):
            pattern = RecurrencePattern.parse(data.get("recurrencePattern"))
            raw_end_date = data.get("recurrenceEndDate")
            recurrence = Recurring(
                days_of_week=frozenset(data.get("recurrenceDays") or []),
                pattern=pattern,
                end_date=parse_date(raw_end_date, field="recurrenceEndDate") if raw_end_date else None,
            )

        return cls(anchor=anchor, recurrence=recurrence)
