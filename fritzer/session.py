"""Session handling for the FRITZ!Box login protocol.

A login run goes through the following steps::

    probe -> [cached sid attempt] -> [credential login] -> [store sid]

The probe fetches a fresh session document holding the challenge and the
list of users. A stored session id is tried next and reused if the box still
accepts it, in which case no challenge response is computed at all. Otherwise,
or if no session id was stored, exactly one credential login is made using the
challenge of the most recent session document. A successful credential login
is written back to the session store.

The box keeps the session state on its side, so a second credential login
invalidates the session of the first one. One :class:`LoginSession` represents
one conversation with one box and must not be shared.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from .challenge import derive_response
from .credentials import Credentials, PasswordCallback
from .exceptions import (
    ConnectivityError,
    FritzerException,
    InvalidCredentials,
    PasswordRequired,
    StorePersistFailure,
    UsernameRequired,
)
from .sessioninfo import SessionInfo
from .sessionstore import SessionStore
from .transports import LoginTransport

_LOGGER = logging.getLogger(__name__)


class SessionState(Enum):
    """Enum for the login state."""

    UNAUTHENTICATED = auto()  # No session document obtained yet
    PROBED = auto()  # Fresh challenge available
    CACHED_SID_ACCEPTED = auto()
    CACHED_SID_REJECTED = auto()
    CREDENTIAL_AUTH_ATTEMPTED = auto()
    AUTHENTICATED = auto()  # Session id valid
    FAILED = auto()  # Credential login failed


class LoginSession:
    """Login state machine owning the current session document."""

    def __init__(
        self,
        transport: LoginTransport,
        *,
        store: SessionStore | None = None,
        credentials: Credentials | None = None,
        password_callback: PasswordCallback | None = None,
    ) -> None:
        self._transport = transport
        self._store = store
        self._credentials = credentials or Credentials()
        self._password_callback = password_callback

        #: Most recent session document, None until the box was asked
        self.session_info: SessionInfo | None = None
        self._state = SessionState.UNAUTHENTICATED

    @property
    def state(self) -> SessionState:
        """Return the current login state."""
        return self._state

    def _set_state(self, state: SessionState) -> None:
        _LOGGER.debug("Login state %s -> %s", self._state.name, state.name)
        self._state = state

    @property
    def sid(self) -> str | None:
        """Return the session id if the session is authenticated."""
        if self.session_info is not None and self.is_connected():
            return self.session_info.sid
        return None

    def is_connected(self) -> bool:
        """Return True if the current session id is an authenticated one."""
        return self.session_info is not None and self.session_info.is_valid

    async def update_session_info(self) -> SessionInfo:
        """Fetch a fresh session document from the box."""
        try:
            session_info = await self._transport.get_session_info()
        except ConnectivityError:
            raise
        except FritzerException as ex:
            raise ConnectivityError(
                f"Unable to receive session information: {ex}", ex
            ) from ex

        self.session_info = session_info
        self._set_state(SessionState.PROBED)
        if session_info.block_time > 0:
            _LOGGER.warning(
                "Box blocks logins for another %s seconds", session_info.block_time
            )
        return session_info

    async def connect_with_sid(self, sid: str) -> bool:
        """Try to continue the session of a previously obtained session id."""
        self.session_info = await self._transport.connect_with_sid(sid)

        if self.is_connected():
            self._set_state(SessionState.CACHED_SID_ACCEPTED)
            self._set_state(SessionState.AUTHENTICATED)
        else:
            self._set_state(SessionState.CACHED_SID_REJECTED)
        return self.is_connected()

    async def connect_with_credentials(
        self, username: str | None = None, password: str | None = None
    ) -> bool:
        """Log in by answering the challenge of the most recent session document.

        The user flagged as last logged in by the box takes precedence over
        the given username.
        """
        if self.session_info is None:
            await self.update_session_info()
        session_info: SessionInfo = self.session_info  # type: ignore[assignment]

        try:
            username = self._resolve_username(session_info, username)
            challenge = session_info.parsed_challenge
            password = await self._resolve_password(password)
            response = derive_response(challenge, password)

            self._set_state(SessionState.CREDENTIAL_AUTH_ATTEMPTED)
            _LOGGER.debug("Logging in as %s", username)
            self.session_info = await self._transport.connect_with_response(
                username, response
            )
        except FritzerException:
            self._set_state(SessionState.FAILED)
            raise

        if not self.is_connected():
            self._set_state(SessionState.FAILED)
            raise InvalidCredentials(f"Login as {username} was rejected by the box")

        self._set_state(SessionState.AUTHENTICATED)
        return True

    def _resolve_username(self, session_info: SessionInfo, username: str | None) -> str:
        if (user := session_info.last_user) is not None:
            return user.username
        if username:
            return username
        if self._credentials.username:
            return self._credentials.username
        raise UsernameRequired("No username available.")

    async def _resolve_password(self, password: str | None) -> str:
        if password is not None:
            return password
        if self._credentials.password is not None:
            return self._credentials.password
        if self._password_callback is not None:
            return await self._password_callback()
        raise PasswordRequired("No password available.")

    async def connect(self) -> SessionInfo:
        """Authenticate, reusing the stored session id if the box accepts it."""
        await self.update_session_info()
        _LOGGER.debug("Session info: %s", self.session_info)

        stored_sid = await self._store.load() if self._store is not None else None
        if stored_sid is None:
            _LOGGER.info("No cached SID available. Request new SID...")
        elif await self._try_stored_sid(stored_sid):
            _LOGGER.info("Cached SID still valid. Re-use...")
            return self.session_info  # type: ignore[return-value]
        else:
            _LOGGER.info("Cached SID invalid. Request new SID...")

        await self.connect_with_credentials()
        await self._store_sid()
        return self.session_info  # type: ignore[return-value]

    async def _try_stored_sid(self, sid: str) -> bool:
        try:
            return await self.connect_with_sid(sid)
        except FritzerException as ex:
            _LOGGER.debug("Could not validate SID due to the following error: %s", ex)
            self._set_state(SessionState.CACHED_SID_REJECTED)
            return False

    async def _store_sid(self) -> None:
        if self._store is None or self.sid is None:
            return
        try:
            await self._store.save(self.sid)
        except (StorePersistFailure, OSError) as ex:
            _LOGGER.warning("Unable to cache SID: %s", ex)

    async def logout(self) -> None:
        """Invalidate the current session id on the box."""
        if (sid := self.sid) is None:
            _LOGGER.debug("Not logged in, nothing to log out")
            return
        self.session_info = await self._transport.logout(sid)
        self._set_state(SessionState.UNAUTHENTICATED)
