"""Credentials class for username / passwords."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

#: Coroutine function returning the password when credential login is needed
PasswordCallback = Callable[[], Awaitable[str]]


@dataclass
class Credentials:
    """Credentials for authentication."""

    #: FRITZ!Box user, defaults to the last logged in user reported by the box
    username: str | None = field(default=None)
    #: Password of the FRITZ!Box user
    password: str | None = field(default=None, repr=False)
