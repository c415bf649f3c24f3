"""fritzer exceptions."""

from __future__ import annotations

from asyncio import TimeoutError as _asyncioTimeoutError


class FritzerException(Exception):
    """Base exception for library errors."""


class ConnectivityError(FritzerException):
    """Exception for failed exchanges with the box."""


class TimeoutError(ConnectivityError, _asyncioTimeoutError):
    """Timeout exception for box requests."""

    def __repr__(self) -> str:
        return FritzerException.__repr__(self)

    def __str__(self) -> str:
        return FritzerException.__str__(self)


class ChallengeError(FritzerException):
    """Base exception for login challenge errors."""

    def __init__(self, *args, challenge: str | None = None) -> None:
        self.challenge = challenge
        super().__init__(*args)


class MalformedChallenge(ChallengeError):
    """The challenge string could not be parsed."""


class UnsupportedProtocolVersion(ChallengeError):
    """The challenge uses a login protocol version other than 2."""


class AuthenticationError(FritzerException):
    """Base exception for authentication errors."""


class InvalidCredentials(AuthenticationError):
    """The box rejected the username and password."""


class UsernameRequired(AuthenticationError):
    """No username was given and the box reports no last logged in user."""


class PasswordRequired(AuthenticationError):
    """Credential authentication is needed but no password is available."""


class StorePersistFailure(FritzerException):
    """The session id could not be persisted."""
