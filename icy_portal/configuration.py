"""Codec for the thermostat configuration array.

Layout of the array as reported by the portal:

    index 0:  mode bits (4 heating, 32 comfort, 64 saving, 128 fixed)
    index 4:  default away setpoint, in half degrees
    index 5:  default saving setpoint, in half degrees
    index 6:  default comfort setpoint, in half degrees

The remaining indices are passed through untouched.
"""

from collections.abc import Sequence

from .const import (
    CONFIG_AWAY_INDEX,
    CONFIG_COMFORT_INDEX,
    CONFIG_MIN_LENGTH,
    CONFIG_MODE_INDEX,
    CONFIG_SAVING_INDEX,
    MODE_COMFORT_BIT,
    MODE_FIXED_BIT,
    MODE_HEATING_BIT,
    MODE_SAVING_BIT,
    MODE_VALUE_AWAY,
    MODE_VALUE_COMFORT,
    MODE_VALUE_FIXED,
    MODE_VALUE_SAVING,
)
from .models import ThermostatSetting


def _check_length(config: Sequence[int]) -> None:
    if len(config) < CONFIG_MIN_LENGTH:
        error_msg = (
            f"Configuration needs at least {CONFIG_MIN_LENGTH} values, "
            f"got {len(config)}"
        )
        raise ValueError(error_msg)


def _half(raw: int) -> float:
    # Integer halving first; odd raw values lose the half degree.
    return float(raw // 2)


def read_mode(config: Sequence[int]) -> ThermostatSetting:
    """Resolve the operating mode from the mode bits.

    The fixed bit wins over saving, which wins over comfort. No mode bit
    means away. The heating bit is ignored here.
    """
    _check_length(config)
    mode_bits = config[CONFIG_MODE_INDEX]
    if mode_bits & MODE_FIXED_BIT:
        return ThermostatSetting.FIXED
    if mode_bits & MODE_SAVING_BIT:
        return ThermostatSetting.SAVING
    if mode_bits & MODE_COMFORT_BIT:
        return ThermostatSetting.COMFORT
    return ThermostatSetting.AWAY


def is_heating(config: Sequence[int]) -> bool:
    """Return True when the boiler is currently asked for heat."""
    _check_length(config)
    return bool(config[CONFIG_MODE_INDEX] & MODE_HEATING_BIT)


def default_comfort_temperature(config: Sequence[int]) -> float:
    _check_length(config)
    return _half(config[CONFIG_COMFORT_INDEX])


def default_away_temperature(config: Sequence[int]) -> float:
    _check_length(config)
    return _half(config[CONFIG_AWAY_INDEX])


def default_saving_temperature(config: Sequence[int]) -> float:
    _check_length(config)
    return _half(config[CONFIG_SAVING_INDEX])


def write_mode(config: Sequence[int], mode: ThermostatSetting) -> tuple[int, float]:
    """Compute the mode bits and desired temperature for a new mode.

    Switching mode always resets the desired temperature to the default
    setpoint of that mode. Fixed mode starts from the away setpoint.

    Args:
        config: Current configuration array.
        mode: Mode to switch to.

    Returns:
        Tuple of (new value for index 0, new desired temperature).

    """
    _check_length(config)
    if mode is ThermostatSetting.AWAY:
        return MODE_VALUE_AWAY, default_away_temperature(config)
    if mode is ThermostatSetting.COMFORT:
        return MODE_VALUE_COMFORT, default_comfort_temperature(config)
    if mode is ThermostatSetting.SAVING:
        return MODE_VALUE_SAVING, default_saving_temperature(config)
    return MODE_VALUE_FIXED, default_away_temperature(config)


def apply_mode(
    config: Sequence[int], mode: ThermostatSetting
) -> tuple[list[int], float]:
    """Return a copy of the configuration switched to a new mode.

    Returns:
        Tuple of (new configuration array, new desired temperature).

    """
    mode_bits, desired_temperature = write_mode(config, mode)
    new_config = list(config)
    new_config[CONFIG_MODE_INDEX] = mode_bits
    return new_config, desired_temperature
