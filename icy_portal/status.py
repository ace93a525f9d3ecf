"""Thermostat status model."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from . import configuration
from .models import ScheduleEntry, ThermostatSetting


@dataclass
class ThermostatStatus:
    """Status of a thermostat as reported by the portal.

    Mode, heating flag and default setpoints are views over
    ``configuration`` and are not stored separately.

    Attributes:
        account_id: Portal uid of the thermostat.
        first_seen: When the portal first saw the device.
        last_seen: When the device last reported.
        current_temperature: Measured room temperature.
        desired_temperature: Current setpoint.
        schedule: Weekly schedule, in the order the portal sent it.
        configuration: Raw configuration array.

    """

    account_id: str
    first_seen: datetime
    last_seen: datetime
    current_temperature: float
    desired_temperature: float
    schedule: list[ScheduleEntry] = field(default_factory=list)
    configuration: list[int] = field(default_factory=list)

    @property
    def setting(self) -> ThermostatSetting:
        return configuration.read_mode(self.configuration)

    @property
    def is_heating(self) -> bool:
        return configuration.is_heating(self.configuration)

    @property
    def default_comfort_temperature(self) -> float:
        return configuration.default_comfort_temperature(self.configuration)

    @property
    def default_away_temperature(self) -> float:
        return configuration.default_away_temperature(self.configuration)

    @property
    def default_saving_temperature(self) -> float:
        return configuration.default_saving_temperature(self.configuration)

    def with_setting(self, mode: ThermostatSetting) -> "ThermostatStatus":
        """Return a copy switched to another mode.

        The mode bits and the desired temperature change together; this
        instance is left untouched.
        """
        new_config, desired_temperature = configuration.apply_mode(
            self.configuration, mode
        )
        return replace(
            self,
            configuration=new_config,
            desired_temperature=desired_temperature,
            schedule=list(self.schedule),
        )
