"""Transport for the FRITZ!Box login endpoint.

The endpoint hands out the session document for three kinds of requests:

* an unauthenticated GET, used to obtain a fresh challenge,
* a POST of ``sid=<sid>`` to check a previously obtained session id,
* a POST of ``username=<name>&response=<response>`` to log in.

All of them are answered with the same ``SessionInfo`` document.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from urllib.parse import quote

from ..exceptions import ConnectivityError
from ..sessioninfo import SessionInfo
from .basetransport import BaseTransport

_LOGGER = logging.getLogger(__name__)


class LoginTransport(BaseTransport):
    """Interface of transports authenticating against the box."""

    @abstractmethod
    async def get_session_info(self) -> SessionInfo:
        """Request a fresh session document without authentication."""

    @abstractmethod
    async def connect_with_sid(self, sid: str) -> SessionInfo:
        """Submit a previously obtained session id."""

    @abstractmethod
    async def connect_with_response(self, username: str, response: str) -> SessionInfo:
        """Submit the username and the derived challenge response."""

    @abstractmethod
    async def logout(self, sid: str) -> SessionInfo:
        """Invalidate the session id on the box."""


class FritzboxLoginTransport(LoginTransport):
    """Login transport for ``/login_sid.lua`` with login version 2."""

    ENDPOINT = "/login_sid.lua"
    PARAMS = {"version": "2"}
    COMMON_HEADERS = {
        "Content-Type": "application/x-www-form-urlencoded",
    }

    @property
    def endpoint(self) -> str:
        """The path of the login endpoint."""
        return self.ENDPOINT

    async def get_session_info(self) -> SessionInfo:
        """Request a fresh session document without authentication."""
        status, text = await self._http_client.get(self.url, params=self.PARAMS)
        return self._handle_response(status, text, "session info request")

    async def connect_with_sid(self, sid: str) -> SessionInfo:
        """Submit a previously obtained session id."""
        return await self._post(f"sid={quote(sid)}", "session id login")

    async def connect_with_response(self, username: str, response: str) -> SessionInfo:
        """Submit the username and the derived challenge response.

        The response already carries its separator url-encoded and is sent as is.
        """
        body = f"username={quote(username, safe='')}&response={response}"
        return await self._post(body, "credential login")

    async def logout(self, sid: str) -> SessionInfo:
        """Invalidate the session id on the box."""
        return await self._post(f"logout=1&sid={quote(sid)}", "logout")

    async def _post(self, body: str, action: str) -> SessionInfo:
        status, text = await self._http_client.post(
            self.url,
            params=self.PARAMS,
            data=body,
            headers=self.COMMON_HEADERS,
        )
        return self._handle_response(status, text, action)

    def _handle_response(self, status: int, text: str, action: str) -> SessionInfo:
        if status != 200:
            raise ConnectivityError(
                f"{self._base_url.host} responded with an unexpected "
                + f"status code {status} to {action}"
            )
        session_info = SessionInfo.from_xml(text)
        _LOGGER.debug(
            "%s answered %s with block time %s and users %s",
            self._base_url.host,
            action,
            session_info.block_time,
            [user.username for user in session_info.users],
        )
        return session_info
