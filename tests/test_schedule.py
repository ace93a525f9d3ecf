"""Tests for the packed schedule codec."""

import pytest

from icy_portal import schedule
from icy_portal.models import ScheduleEntry, ThermostatSetting, Weekday

REPRESENTABLE_SETTINGS = (
    ThermostatSetting.AWAY,
    ThermostatSetting.COMFORT,
    ThermostatSetting.SAVING,
)


class TestDecodeScheduleEntry:
    """Tests for decode_schedule_entry function."""

    def test_decode_returns_none_for_unused_slot(self) -> None:
        """Test that the all-ones value decodes to no entry."""
        assert schedule.decode_schedule_entry(0xFFFF) is None

    def test_decode_comfort_slot(self) -> None:
        """Test that bit 15 decodes to comfort."""
        entry = schedule.decode_schedule_entry((1 << 15) + 390)
        assert entry == ScheduleEntry(Weekday.MONDAY, 390, ThermostatSetting.COMFORT)

    def test_decode_saving_slot(self) -> None:
        """Test that bit 14 decodes to saving."""
        entry = schedule.decode_schedule_entry((1 << 14) + 2 * 1440 + 1320)
        assert entry == ScheduleEntry(
            Weekday.WEDNESDAY, 1320, ThermostatSetting.SAVING
        )

    def test_decode_away_slot(self) -> None:
        """Test that a slot without mode bits decodes to away."""
        entry = schedule.decode_schedule_entry(6 * 1440 + 1439)
        assert entry == ScheduleEntry(Weekday.SUNDAY, 1439, ThermostatSetting.AWAY)

    def test_decode_comfort_wins_over_saving(self) -> None:
        """Test that bit 15 takes priority when both mode bits are set."""
        entry = schedule.decode_schedule_entry((1 << 15) | (1 << 14) | 60)
        assert entry is not None
        assert entry.setting is ThermostatSetting.COMFORT
        assert entry.day is Weekday.MONDAY
        assert entry.minute_of_day == 60

    def test_decode_raises_for_invalid_day(self) -> None:
        """Test that a day index above Sunday is rejected."""
        with pytest.raises(ValueError, match="invalid day 7"):
            schedule.decode_schedule_entry(7 * 1440)

    def test_decode_raises_for_out_of_range_value(self) -> None:
        """Test that values outside 16 bits are rejected."""
        with pytest.raises(ValueError, match="out of range"):
            schedule.decode_schedule_entry(0x10000)
        with pytest.raises(ValueError, match="out of range"):
            schedule.decode_schedule_entry(-1)

    def test_decode_every_value_succeeds_or_reports_day(self) -> None:
        """Test that every 16-bit value decodes, is absent, or has a bad day."""
        for raw in range(0x10000):
            try:
                entry = schedule.decode_schedule_entry(raw)
            except ValueError as err:
                assert "invalid day" in str(err)
                continue
            if raw == 0xFFFF:
                assert entry is None
            else:
                assert entry is not None


class TestEncodeScheduleEntry:
    """Tests for encode_schedule_entry function."""

    def test_encode_comfort_entry(self) -> None:
        """Test that comfort adds bit 15."""
        entry = ScheduleEntry(Weekday.TUESDAY, 480, ThermostatSetting.COMFORT)
        assert schedule.encode_schedule_entry(entry) == (1 << 15) + 1440 + 480

    def test_encode_saving_entry(self) -> None:
        """Test that saving adds bit 14."""
        entry = ScheduleEntry(Weekday.MONDAY, 0, ThermostatSetting.SAVING)
        assert schedule.encode_schedule_entry(entry) == 1 << 14

    def test_encode_away_entry(self) -> None:
        """Test that away adds no mode bits."""
        entry = ScheduleEntry(Weekday.SATURDAY, 15, ThermostatSetting.AWAY)
        assert schedule.encode_schedule_entry(entry) == 5 * 1440 + 15

    def test_encode_returns_none_for_fixed(self) -> None:
        """Test that fixed entries cannot be encoded."""
        for day in Weekday:
            entry = ScheduleEntry(day, 720, ThermostatSetting.FIXED)
            assert schedule.encode_schedule_entry(entry) is None

    def test_decode_inverts_encode(self) -> None:
        """Test that decoding an encoded entry gives the same entry back."""
        for day in Weekday:
            for setting in REPRESENTABLE_SETTINGS:
                for minute_of_day in range(1440):
                    entry = ScheduleEntry(day, minute_of_day, setting)
                    raw = schedule.encode_schedule_entry(entry)
                    assert raw is not None
                    assert schedule.decode_schedule_entry(raw) == entry


class TestWeekClock:
    """Tests for decode_week_clock and encode_week_clock functions."""

    def test_decode_week_clock_drops_unused_slots_and_keeps_order(self) -> None:
        """Test that unused slots are skipped and order is preserved."""
        raws = [0xFFFF, 1440 + 480, 0xFFFF, (1 << 15) + 390]
        entries = schedule.decode_week_clock(raws)
        assert entries == [
            ScheduleEntry(Weekday.TUESDAY, 480, ThermostatSetting.AWAY),
            ScheduleEntry(Weekday.MONDAY, 390, ThermostatSetting.COMFORT),
        ]

    def test_decode_week_clock_returns_empty_list_when_all_unused(self) -> None:
        """Test that a clock of unused slots decodes to an empty schedule."""
        assert schedule.decode_week_clock([0xFFFF] * 4) == []

    def test_encode_week_clock_keeps_order(self) -> None:
        """Test that entries are encoded in order."""
        entries = [
            ScheduleEntry(Weekday.TUESDAY, 480, ThermostatSetting.AWAY),
            ScheduleEntry(Weekday.MONDAY, 390, ThermostatSetting.COMFORT),
        ]
        assert schedule.encode_week_clock(entries) == [1440 + 480, (1 << 15) + 390]

    def test_encode_week_clock_raises_for_fixed_entry(self) -> None:
        """Test that a single fixed entry fails the whole clock."""
        entries = [
            ScheduleEntry(Weekday.MONDAY, 390, ThermostatSetting.COMFORT),
            ScheduleEntry(Weekday.MONDAY, 600, ThermostatSetting.FIXED),
        ]
        with pytest.raises(ValueError, match="Schedule entry 1"):
            schedule.encode_week_clock(entries)
