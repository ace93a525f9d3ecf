"""Pytest configuration and fixtures for ICY portal tests."""

from datetime import datetime

import pytest

from icy_portal.const import PORTAL_TIMEZONE
from icy_portal.models import (
    DisplayName,
    ScheduleEntry,
    Session,
    ThermostatSetting,
    Weekday,
)
from icy_portal.status import ThermostatStatus

SAMPLE_TOKEN = "0123456789abcdef"
SAMPLE_UID = "c0ffee00-1234"

# Monday 06:30 comfort, Monday 22:00 saving, unused slot, Tuesday 08:00 away.
SAMPLE_WEEK_CLOCK = [32768 + 390, 16384 + 1320, 65535, 1440 + 480]
SAMPLE_CONFIGURATION = [36, 0, 0, 0, 30, 34, 41, 0]


@pytest.fixture
def sample_login_response() -> dict:
    """Fixture providing a successful login response."""
    return {
        "status": {"code": 200},
        "name": "Jan",
        "preposition": "van",
        "lastname": "Dijk",
        "username": "jvandijk",
        "token": SAMPLE_TOKEN,
        "email": "jan@example.com",
    }


@pytest.fixture
def sample_status_response() -> dict:
    """Fixture providing a successful data response."""
    return {
        "status": {"code": 200},
        "uid": SAMPLE_UID,
        "first-seen": "2015-03-01 12:00:00",
        "last-seen": "2026-10-19 10:15:30",
        "temperature1": 20.5,
        "temperature2": 19,
        "week-clock": list(SAMPLE_WEEK_CLOCK),
        "configuration": list(SAMPLE_CONFIGURATION),
    }


@pytest.fixture
def sample_session() -> Session:
    """Fixture providing a logged in session."""
    return Session(
        name=DisplayName(first="Jan", infix="van", last="Dijk"),
        username="jvandijk",
        token=SAMPLE_TOKEN,
        email="jan@example.com",
    )


@pytest.fixture
def sample_status() -> ThermostatStatus:
    """Fixture providing a decoded thermostat status."""
    return ThermostatStatus(
        account_id=SAMPLE_UID,
        first_seen=datetime(2015, 3, 1, 12, 0, tzinfo=PORTAL_TIMEZONE),
        last_seen=datetime(2026, 10, 19, 10, 15, 30, tzinfo=PORTAL_TIMEZONE),
        current_temperature=19.0,
        desired_temperature=20.5,
        schedule=[
            ScheduleEntry(Weekday.MONDAY, 390, ThermostatSetting.COMFORT),
            ScheduleEntry(Weekday.MONDAY, 1320, ThermostatSetting.SAVING),
            ScheduleEntry(Weekday.TUESDAY, 480, ThermostatSetting.AWAY),
        ],
        configuration=list(SAMPLE_CONFIGURATION),
    )
