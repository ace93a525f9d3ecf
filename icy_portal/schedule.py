"""Codec for the packed weekly schedule.

Each schedule slot is a 16-bit integer:

    bit 15:     comfort
    bit 14:     saving (only checked when bit 15 is clear)
    bits 0-13:  day * 1440 + minute of day

Neither mode bit set means away. The all-ones value marks an unused slot.
"""

import logging
from collections.abc import Iterable

from .const import (
    MINUTES_PER_DAY,
    SLOT_ABSENT,
    SLOT_COMFORT_BIT,
    SLOT_MAX,
    SLOT_SAVING_BIT,
)
from .models import ScheduleEntry, ThermostatSetting, Weekday

_LOGGER = logging.getLogger(__name__)


def decode_schedule_entry(raw: int) -> ScheduleEntry | None:
    """Decode a packed schedule slot.

    Args:
        raw: Packed 16-bit slot value.

    Returns:
        The decoded entry, or None for an unused slot.

    Raises:
        ValueError: If the value is not a 16-bit integer or its day is
            out of range.

    """
    if not 0 <= raw <= SLOT_MAX:
        error_msg = f"Schedule slot out of range: {raw}"
        raise ValueError(error_msg)

    if raw == SLOT_ABSENT:
        return None

    if raw & SLOT_COMFORT_BIT:
        setting = ThermostatSetting.COMFORT
    elif raw & SLOT_SAVING_BIT:
        setting = ThermostatSetting.SAVING
    else:
        setting = ThermostatSetting.AWAY

    remainder = raw & ~(SLOT_COMFORT_BIT | SLOT_SAVING_BIT)
    day_index, minute_of_day = divmod(remainder, MINUTES_PER_DAY)
    try:
        day = Weekday(day_index)
    except ValueError as err:
        error_msg = f"Schedule slot {raw} has invalid day {day_index}"
        raise ValueError(error_msg) from err

    return ScheduleEntry(day=day, minute_of_day=minute_of_day, setting=setting)


def encode_schedule_entry(entry: ScheduleEntry) -> int | None:
    """Encode a schedule entry into a packed slot.

    Returns:
        The packed value, or None when the setting is FIXED, which has no
        packed representation.

    """
    value = entry.minute_of_day + entry.day * MINUTES_PER_DAY
    if entry.setting is ThermostatSetting.COMFORT:
        return value + SLOT_COMFORT_BIT
    if entry.setting is ThermostatSetting.SAVING:
        return value + SLOT_SAVING_BIT
    if entry.setting is ThermostatSetting.AWAY:
        return value
    return None


def decode_week_clock(raws: Iterable[int]) -> list[ScheduleEntry]:
    """Decode a list of packed slots, keeping order and dropping unused ones."""
    entries = []
    for raw in raws:
        entry = decode_schedule_entry(raw)
        if entry is not None:
            entries.append(entry)
    return entries


def encode_week_clock(entries: Iterable[ScheduleEntry]) -> list[int]:
    """Encode schedule entries in order.

    Raises:
        ValueError: If any entry cannot be encoded. Nothing is returned in
            that case, since the portal replaces the whole schedule.

    """
    values = []
    for index, entry in enumerate(entries):
        value = encode_schedule_entry(entry)
        if value is None:
            _LOGGER.warning("Schedule entry %d cannot be encoded: %s", index, entry)
            error_msg = (
                f"Schedule entry {index} has setting {entry.setting.value}, "
                "which cannot be stored in the week clock"
            )
            raise ValueError(error_msg)
        values.append(value)
    return values
