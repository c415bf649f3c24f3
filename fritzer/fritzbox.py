"""Interface to a FRITZ!Box.

>>> from fritzer import BoxConfig, Credentials, Fritzbox
>>> config = BoxConfig("http://fritz.box", credentials=Credentials(password="secret"))
>>> async with Fritzbox(config) as box:
...     await box.connect()
...     for switch in await box.get_switches():
...         print(switch.ain, switch.name)
087610006161 Living Room
"""

from __future__ import annotations

import logging
from types import TracebackType

from .boxconfig import BoxConfig
from .credentials import PasswordCallback
from .exceptions import AuthenticationError
from .httpclient import HttpClient
from .session import LoginSession
from .sessioninfo import SessionInfo
from .sessionstore import FileSessionStore, SessionStore
from .transports import (
    Device,
    FritzboxLoginTransport,
    FritzboxSwitchTransport,
    LoginTransport,
    SwitchTransport,
)

_LOGGER = logging.getLogger(__name__)


class Fritzbox:
    """A FRITZ!Box reachable over its AHA http interface."""

    def __init__(
        self,
        config: BoxConfig,
        *,
        login_transport: LoginTransport | None = None,
        switch_transport: SwitchTransport | None = None,
        store: SessionStore | None = None,
        password_callback: PasswordCallback | None = None,
    ) -> None:
        self._config = config
        self._http_client = HttpClient(config)
        self._login_transport = login_transport or FritzboxLoginTransport(
            config=config, http_client=self._http_client
        )
        self._switch_transport = switch_transport or FritzboxSwitchTransport(
            config=config, http_client=self._http_client
        )
        self._session = LoginSession(
            self._login_transport,
            store=store if store is not None else FileSessionStore(config.sid_path),
            credentials=config.credentials,
            password_callback=password_callback,
        )

    def __repr__(self) -> str:
        return f"<Fritzbox at {self._config.url} - connected: {self.is_connected()}>"

    @property
    def config(self) -> BoxConfig:
        """Return the box configuration."""
        return self._config

    @property
    def session(self) -> LoginSession:
        """Return the login session."""
        return self._session

    @property
    def session_info(self) -> SessionInfo | None:
        """Return the most recent session document."""
        return self._session.session_info

    def is_connected(self) -> bool:
        """Return True if the box accepted the current session id."""
        return self._session.is_connected()

    async def connect(self) -> SessionInfo:
        """Authenticate with the box."""
        return await self._session.connect()

    async def get_switches(self) -> list[Device]:
        """Return the switches of the box."""
        if (sid := self._session.sid) is None:
            raise AuthenticationError("Not connected, call connect() first")
        return await self._switch_transport.get_switches(sid)

    async def logout(self) -> None:
        """Invalidate the session on the box."""
        await self._session.logout()

    async def close(self) -> None:
        """Close the http connections to the box."""
        await self._login_transport.close()
        await self._switch_transport.close()
        await self._http_client.close()

    async def __aenter__(self) -> Fritzbox:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
