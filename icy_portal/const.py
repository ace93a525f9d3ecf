"""Constants for the ICY portal client.

This module contains the portal endpoints, header names, wire formats and
the bit layout of the packed schedule slots and the configuration array.
"""

from datetime import timedelta
from zoneinfo import ZoneInfo

BASE_URL = "https://portal.icy.nl"
LOGIN_PATH = "/login"
DATA_PATH = "/data"

SESSION_TOKEN_HEADER = "Session-Token"
USER_AGENT = "icy-portal/0.1.0"

DEFAULT_TIMEOUT = 10.0

# Wire timestamps carry no offset; the portal reports Dutch local time.
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PORTAL_TIMEZONE = ZoneInfo("Europe/Amsterdam")

OFFLINE_THRESHOLD = timedelta(seconds=600)

STATUS_CODE_OK = 200
STATUS_CODES_AUTH = (401, 403)

MINUTES_PER_DAY = 24 * 60

# Packed schedule slot
SLOT_ABSENT = 0xFFFF
SLOT_MAX = 0xFFFF
SLOT_COMFORT_BIT = 1 << 15
SLOT_SAVING_BIT = 1 << 14

# Configuration array
CONFIG_MIN_LENGTH = 7
CONFIG_MODE_INDEX = 0
CONFIG_AWAY_INDEX = 4
CONFIG_SAVING_INDEX = 5
CONFIG_COMFORT_INDEX = 6

MODE_HEATING_BIT = 4
MODE_COMFORT_BIT = 32
MODE_SAVING_BIT = 64
MODE_FIXED_BIT = 128

MODE_VALUE_AWAY = 0
MODE_VALUE_COMFORT = MODE_COMFORT_BIT
MODE_VALUE_SAVING = MODE_SAVING_BIT
MODE_VALUE_FIXED = MODE_FIXED_BIT | MODE_COMFORT_BIT
