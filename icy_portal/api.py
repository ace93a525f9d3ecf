"""API client for the ICY thermostat portal.

This module provides functions to interact with the portal, including
authentication, reading the thermostat status and writing it back.
"""

import logging
from datetime import UTC, datetime, tzinfo
from typing import Any

import httpx

from .const import (
    BASE_URL,
    DATA_PATH,
    DATE_FORMAT,
    DEFAULT_TIMEOUT,
    LOGIN_PATH,
    OFFLINE_THRESHOLD,
    PORTAL_TIMEZONE,
    SESSION_TOKEN_HEADER,
    STATUS_CODE_OK,
    STATUS_CODES_AUTH,
    USER_AGENT,
)
from .models import DisplayName, Session
from .schedule import decode_week_clock, encode_week_clock
from .status import ThermostatStatus

_LOGGER = logging.getLogger(__name__)

DESERIALIZATION_ERROR = "Deserialization error"
UNSPECIFIED_ERROR = "Unspecified error"


class IcyApiClientError(Exception):
    """Base exception for ICY portal client errors."""


class IcyDeserializationError(IcyApiClientError):
    """Exception raised when a response does not have the expected shape."""


class IcyApiError(IcyApiClientError):
    """Exception raised when the portal reports a non-200 status code."""

    def __init__(self, message: str, code: int | None = None) -> None:
        """Initialize with the portal's message and status code."""
        super().__init__(message)
        self.message = message
        self.code = code


class IcyApiAuthError(IcyApiError):
    """Exception raised when the portal rejects credentials or the token."""


class IcyOfflineError(IcyApiClientError):
    """Exception raised when the thermostat has not reported for too long."""

    def __init__(self, last_seen: datetime) -> None:
        """Initialize with the moment the thermostat was last seen."""
        super().__init__(f"Thermostat offline since {last_seen.isoformat()}")
        self.last_seen = last_seen


class IcyEncodingError(IcyApiClientError):
    """Exception raised when a status cannot be encoded for the portal."""


def create_headers(token: str | None = None) -> dict[str, str]:
    """Create HTTP headers for portal requests.

    Args:
        token: Optional session token to include in headers.

    Returns:
        Dictionary containing HTTP headers for API requests.

    """
    headers = {
        "accept": "application/json",
        "user-agent": USER_AGENT,
    }
    if token:
        headers[SESSION_TOKEN_HEADER] = token
    return headers


def is_api_error(status: dict[str, Any]) -> bool:
    """Check if the status object reports anything other than success."""
    return status.get("code") != STATUS_CODE_OK


def is_auth_api_error(status: dict[str, Any]) -> bool:
    """Check if the status object reports a credential or token problem."""
    return status.get("code") in STATUS_CODES_AUTH


def validate_response(response: httpx.Response) -> dict[str, Any]:
    """Validate a portal response and return the parsed JSON object.

    The portal reports errors in a ``status`` object inside the body, so
    the HTTP status line is not consulted.

    Args:
        response: HTTP response object to validate.

    Returns:
        Parsed JSON data from response.

    Raises:
        IcyDeserializationError: If the body is not a JSON object with a
            status object.
        IcyApiAuthError: If the portal rejected the credentials or token.
        IcyApiError: If the portal reported any other error.

    """
    try:
        data = response.json()
    except ValueError as err:
        _LOGGER.debug("Response body is not JSON (HTTP %d)", response.status_code)
        raise IcyDeserializationError(DESERIALIZATION_ERROR) from err

    if not isinstance(data, dict) or not isinstance(data.get("status"), dict):
        raise IcyDeserializationError(DESERIALIZATION_ERROR)

    _validate_api_status(data["status"])
    return data


def _validate_api_status(status: dict[str, Any]) -> None:
    if not is_api_error(status):
        return

    message = status.get("message")
    if not isinstance(message, str):
        message = UNSPECIFIED_ERROR
    code = status.get("code")
    code = code if isinstance(code, int) else None

    if is_auth_api_error(status):
        raise IcyApiAuthError(message, code)

    raise IcyApiError(message, code)


def _require(data: dict[str, Any], key: str, expected: type | tuple[type, ...]) -> Any:
    value = data.get(key)
    if not isinstance(value, expected) or isinstance(value, bool):
        error_msg = f"{DESERIALIZATION_ERROR}: field '{key}' missing or invalid"
        raise IcyDeserializationError(error_msg)
    return value


def float_from_json(value: Any) -> float:
    """Normalize a JSON number to float.

    The portal sends temperatures either with or without a decimal point,
    so both ints and floats are accepted.

    Raises:
        IcyDeserializationError: If the value is not a number.

    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        error_msg = f"{DESERIALIZATION_ERROR}: expected a number, got {value!r}"
        raise IcyDeserializationError(error_msg)
    return float(value)


def parse_timestamp(value: str, tz: tzinfo = PORTAL_TIMEZONE) -> datetime:
    """Parse a portal timestamp and attach the portal time zone."""
    try:
        naive = datetime.strptime(value, DATE_FORMAT)
    except ValueError as err:
        error_msg = f"{DESERIALIZATION_ERROR}: invalid timestamp {value!r}"
        raise IcyDeserializationError(error_msg) from err
    return naive.replace(tzinfo=tz)


def _int_list(data: dict[str, Any], key: str) -> list[int]:
    values = _require(data, key, list)
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        error_msg = f"{DESERIALIZATION_ERROR}: field '{key}' must hold integers"
        raise IcyDeserializationError(error_msg)
    return values


def extract_session(data: dict[str, Any]) -> Session:
    """Extract the session from a login response.

    Raises:
        IcyDeserializationError: If any account field is missing.

    """
    return Session(
        name=DisplayName(
            first=_require(data, "name", str),
            infix=_require(data, "preposition", str),
            last=_require(data, "lastname", str),
        ),
        username=_require(data, "username", str),
        token=_require(data, "token", str),
        email=_require(data, "email", str),
    )


def extract_status(
    data: dict[str, Any], tz: tzinfo = PORTAL_TIMEZONE
) -> ThermostatStatus:
    """Extract the thermostat status from a data response.

    Args:
        data: API response data dictionary.
        tz: Time zone the portal timestamps are expressed in.

    Returns:
        The decoded status. Unused schedule slots are dropped.

    Raises:
        IcyDeserializationError: If any field is missing or malformed.

    """
    week_clock = _int_list(data, "week-clock")
    try:
        schedule = decode_week_clock(week_clock)
    except ValueError as err:
        _LOGGER.warning("Malformed week clock: %s", err)
        error_msg = f"{DESERIALIZATION_ERROR}: {err}"
        raise IcyDeserializationError(error_msg) from err

    return ThermostatStatus(
        account_id=_require(data, "uid", str),
        first_seen=parse_timestamp(_require(data, "first-seen", str), tz),
        last_seen=parse_timestamp(_require(data, "last-seen", str), tz),
        current_temperature=float_from_json(data.get("temperature2")),
        desired_temperature=float_from_json(data.get("temperature1")),
        schedule=schedule,
        configuration=_int_list(data, "configuration"),
    )


def build_login_form(username: str, password: str) -> dict[str, str]:
    """Build the form body of a login request."""
    return {"username": username, "password": password, "remember": "1"}


def build_status_form(status: ThermostatStatus) -> dict[str, Any]:
    """Build the form body that replaces the status on the portal.

    Raises:
        IcyEncodingError: If a schedule entry cannot be encoded.

    """
    try:
        week_clock = encode_week_clock(status.schedule)
    except ValueError as err:
        raise IcyEncodingError(str(err)) from err

    return {
        "uid": status.account_id,
        "temperature1": str(status.desired_temperature),
        "configuration[]": [str(value) for value in status.configuration],
        "week-clock[]": [str(value) for value in week_clock],
    }


def validate_status(
    status: ThermostatStatus, now: datetime | None = None
) -> ThermostatStatus:
    """Check that the thermostat reported recently.

    Args:
        status: Status to check.
        now: Timezone-aware reference moment, defaults to the current time.

    Returns:
        The same status.

    Raises:
        IcyOfflineError: If the last report is more than 600 seconds old.
        ValueError: If now is a naive datetime.

    """
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None or now.utcoffset() is None:
        error_msg = "now must be timezone-aware"
        raise ValueError(error_msg)
    if now - status.last_seen > OFFLINE_THRESHOLD:
        raise IcyOfflineError(status.last_seen)
    return status


def create_session_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Create the HTTP client used for portal requests.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx AsyncClient.

    """
    return httpx.AsyncClient(headers=create_headers(), timeout=timeout)


async def async_login(
    session: httpx.AsyncClient,
    username: str,
    password: str,
    *,
    base_url: str = BASE_URL,
) -> Session:
    """Authenticate with the portal using username and password.

    Args:
        session: HTTP client session.
        username: Portal username.
        password: Portal password.
        base_url: Portal root URL.

    Returns:
        The authenticated Session.

    Raises:
        IcyApiAuthError: If the credentials are rejected.
        IcyApiError: If the portal reports another error.
        IcyDeserializationError: If the response lacks account fields.

    """
    url = f"{base_url}{LOGIN_PATH}"
    headers = create_headers()

    _LOGGER.debug("Logging in to ICY portal as %s", username)
    response = await session.post(
        url, headers=headers, data=build_login_form(username, password)
    )
    data = validate_response(response)
    account = extract_session(data)
    _LOGGER.debug("Successfully logged in to ICY portal as %s", account.username)
    return account


async def async_get_status(
    session: httpx.AsyncClient,
    account: Session,
    *,
    base_url: str = BASE_URL,
    tz: tzinfo = PORTAL_TIMEZONE,
) -> ThermostatStatus:
    """Fetch the thermostat status.

    Staleness is not checked here; see validate_status.

    Args:
        session: HTTP client session.
        account: Session returned by login.
        base_url: Portal root URL.
        tz: Time zone of the portal timestamps.

    Returns:
        The decoded ThermostatStatus.

    Raises:
        IcyApiAuthError: If the token is no longer accepted.
        IcyApiError: If the portal reports another error.
        IcyDeserializationError: If the response is malformed.

    """
    url = f"{base_url}{DATA_PATH}"
    headers = create_headers(account.token)

    _LOGGER.debug("Fetching thermostat status for %s", account.username)
    response = await session.get(url, headers=headers)
    data = validate_response(response)
    status = extract_status(data, tz)
    _LOGGER.debug(
        "Thermostat %s: current %.1f, desired %.1f, %d schedule entries",
        status.account_id,
        status.current_temperature,
        status.desired_temperature,
        len(status.schedule),
    )
    return status


async def async_set_status(
    session: httpx.AsyncClient,
    account: Session,
    status: ThermostatStatus,
    *,
    base_url: str = BASE_URL,
) -> None:
    """Replace the thermostat status on the portal.

    The whole configuration array and schedule are sent; the portal keeps
    no part of the previous values.

    Args:
        session: HTTP client session.
        account: Session returned by login.
        status: Status to store.
        base_url: Portal root URL.

    Raises:
        IcyEncodingError: If the schedule cannot be encoded. No request is
            sent in that case.
        IcyApiAuthError: If the token is no longer accepted.
        IcyApiError: If the portal reports another error.
        IcyDeserializationError: If the response is malformed.

    """
    form = build_status_form(status)
    url = f"{base_url}{DATA_PATH}"
    headers = create_headers(account.token)

    _LOGGER.debug(
        "Storing thermostat status for %s: desired %.1f, %d schedule entries",
        status.account_id,
        status.desired_temperature,
        len(status.schedule),
    )
    response = await session.post(url, headers=headers, data=form)
    validate_response(response)
    _LOGGER.debug("Thermostat status stored for %s", status.account_id)
