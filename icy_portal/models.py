"""Data models for the ICY portal client."""

from dataclasses import dataclass, field
from datetime import time
from enum import Enum, IntEnum

from .const import MINUTES_PER_DAY


class Weekday(IntEnum):
    """Day of the week, Monday first, as used by the packed schedule."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def calendar_number(self) -> int:
        """Sunday-first weekday number (Sunday = 1, Saturday = 7)."""
        return (self.value + 1) % 7 + 1


class ThermostatSetting(Enum):
    """Operating mode of the thermostat."""

    AWAY = "away"
    COMFORT = "comfort"
    SAVING = "saving"
    FIXED = "fixed"


@dataclass(frozen=True)
class ScheduleEntry:
    """A single switch moment of the weekly schedule.

    Attributes:
        day: Day the switch happens on.
        minute_of_day: Minutes after midnight, 0 to 1439.
        setting: Mode the thermostat switches to. FIXED can be held here
            but has no packed representation.

    """

    day: Weekday
    minute_of_day: int
    setting: ThermostatSetting

    def __post_init__(self) -> None:
        try:
            day = Weekday(self.day)
        except ValueError as err:
            error_msg = f"day out of range: {self.day}"
            raise ValueError(error_msg) from err
        object.__setattr__(self, "day", day)
        if not 0 <= self.minute_of_day < MINUTES_PER_DAY:
            error_msg = f"minute_of_day out of range: {self.minute_of_day}"
            raise ValueError(error_msg)

    @property
    def hour(self) -> int:
        return self.minute_of_day // 60

    @property
    def minute(self) -> int:
        return self.minute_of_day % 60

    @property
    def calendar_weekday(self) -> int:
        """Sunday-first weekday number for calendar consumers."""
        return self.day.calendar_number

    @property
    def time_of_day(self) -> time:
        return time(self.hour, self.minute)


@dataclass(frozen=True)
class DisplayName:
    """Name of the account holder, split the way the portal stores it."""

    first: str
    infix: str
    last: str

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first, self.infix, self.last) if part)


@dataclass(frozen=True)
class Session:
    """Authenticated portal session returned by login."""

    name: DisplayName
    username: str
    token: str = field(repr=False)
    email: str
