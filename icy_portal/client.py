"""High level client for the ICY portal.

``IcyClient`` owns (or borrows) the HTTP client and exposes every portal
operation twice: as a coroutine, and as a callback-style call that
schedules the coroutine on the running loop and reports a Result.
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import TYPE_CHECKING

from . import api
from .const import BASE_URL, DEFAULT_TIMEOUT, PORTAL_TIMEZONE
from .result import dispatch

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable
    from types import TracebackType

    import httpx

    from .models import Session
    from .result import Result
    from .status import ThermostatStatus

_LOGGER = logging.getLogger(__name__)


class IcyClient:
    """Client for the ICY thermostat portal.

    Concurrent operations are not serialized; two status writes for the
    same account race at the portal.
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        tz: tzinfo = PORTAL_TIMEZONE,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Portal root URL.
            timeout: Request timeout in seconds, used only when the HTTP
                client is created here.
            tz: Time zone of the portal timestamps.
            client: Optional HTTP client to borrow. It is not closed by
                this object.

        """
        self.base_url = base_url.rstrip("/")
        self.tz = tz
        self._owns_client = client is None
        self._client = client if client is not None else api.create_session_client(
            timeout
        )

    async def __aenter__(self) -> IcyClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if it was created here."""
        if self._owns_client:
            _LOGGER.debug("Closing ICY portal HTTP client")
            await self._client.aclose()

    async def async_login(self, username: str, password: str) -> Session:
        """Log in to the portal.

        Args:
            username: Portal username.
            password: Portal password.

        Returns:
            The authenticated Session.

        Raises:
            IcyApiAuthError: If the credentials are rejected.
            IcyApiError: If the portal reports another error.
            IcyDeserializationError: If the response lacks account fields.

        """
        return await api.async_login(
            self._client, username, password, base_url=self.base_url
        )

    async def async_get_status(self, session: Session) -> ThermostatStatus:
        """Fetch the thermostat status for a session.

        Args:
            session: Session returned by login.

        Returns:
            The decoded ThermostatStatus. Staleness is not checked.

        Raises:
            IcyApiAuthError: If the token is no longer accepted.
            IcyApiError: If the portal reports another error.
            IcyDeserializationError: If the response is malformed.

        """
        return await api.async_get_status(
            self._client, session, base_url=self.base_url, tz=self.tz
        )

    async def async_set_status(
        self, session: Session, status: ThermostatStatus
    ) -> None:
        """Replace the thermostat status on the portal.

        Args:
            session: Session returned by login.
            status: Status to store, including the full schedule.

        Raises:
            IcyEncodingError: If the schedule cannot be encoded. Nothing is
                sent in that case.
            IcyApiAuthError: If the token is no longer accepted.
            IcyApiError: If the portal reports another error.

        """
        await api.async_set_status(
            self._client, session, status, base_url=self.base_url
        )

    def login(
        self,
        username: str,
        password: str,
        callback: Callable[[Result[Session]], None],
    ) -> asyncio.Task[Session]:
        """Log in and report the Session to the callback."""
        return dispatch(self.async_login(username, password), callback)

    def get_status(
        self,
        session: Session,
        callback: Callable[[Result[ThermostatStatus]], None],
    ) -> asyncio.Task[ThermostatStatus]:
        """Fetch the status and report it to the callback."""
        return dispatch(self.async_get_status(session), callback)

    def set_status(
        self,
        session: Session,
        status: ThermostatStatus,
        callback: Callable[[Result[None]], None],
    ) -> asyncio.Task[None]:
        """Store the status and report the outcome to the callback.

        An unencodable schedule is reported as a Failure holding
        IcyEncodingError; nothing is sent to the portal.
        """
        return dispatch(self.async_set_status(session, status), callback)
