"""Client library for the ICY thermostat portal.

Usage:
    from icy_portal import IcyClient, ThermostatSetting

    async with IcyClient() as client:
        session = await client.async_login("user", "password")
        status = await client.async_get_status(session)
        await client.async_set_status(
            session, status.with_setting(ThermostatSetting.COMFORT)
        )
"""

__version__ = "0.1.0"

from .api import (
    IcyApiAuthError,
    IcyApiClientError,
    IcyApiError,
    IcyDeserializationError,
    IcyEncodingError,
    IcyOfflineError,
    validate_status,
)
from .client import IcyClient
from .models import DisplayName, ScheduleEntry, Session, ThermostatSetting, Weekday
from .result import Failure, Result, Success
from .status import ThermostatStatus

__all__ = [
    "DisplayName",
    "Failure",
    "IcyApiAuthError",
    "IcyApiClientError",
    "IcyApiError",
    "IcyClient",
    "IcyDeserializationError",
    "IcyEncodingError",
    "IcyOfflineError",
    "Result",
    "ScheduleEntry",
    "Session",
    "Success",
    "ThermostatSetting",
    "ThermostatStatus",
    "Weekday",
    "__version__",
]
