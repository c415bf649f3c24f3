"""Python interface for the AVM FRITZ!Box home automation http interface.

All common functionality is available through the :class:`Fritzbox` class::

>>> from fritzer import BoxConfig, Fritzbox
>>> box = Fritzbox(BoxConfig("fritz.box"))
>>> await box.connect()
>>> print(await box.get_switches())

Errors are raised as `FritzerException` and are expected
to be handled by the user of the library.
"""

from fritzer.boxconfig import BoxConfig
from fritzer.challenge import Challenge, derive_response, parse_challenge
from fritzer.credentials import Credentials
from fritzer.exceptions import (
    AuthenticationError,
    ChallengeError,
    ConnectivityError,
    FritzerException,
    InvalidCredentials,
    MalformedChallenge,
    PasswordRequired,
    StorePersistFailure,
    TimeoutError,
    UnsupportedProtocolVersion,
    UsernameRequired,
)
from fritzer.fritzbox import Fritzbox
from fritzer.session import LoginSession, SessionState
from fritzer.sessioninfo import INVALID_SID, SessionInfo, User
from fritzer.sessionstore import FileSessionStore, SessionStore
from fritzer.transports import Device
from fritzer.version import __version__

__all__ = [
    "AuthenticationError",
    "BoxConfig",
    "Challenge",
    "ChallengeError",
    "ConnectivityError",
    "Credentials",
    "Device",
    "FileSessionStore",
    "Fritzbox",
    "FritzerException",
    "INVALID_SID",
    "InvalidCredentials",
    "LoginSession",
    "MalformedChallenge",
    "PasswordRequired",
    "SessionInfo",
    "SessionState",
    "SessionStore",
    "StorePersistFailure",
    "TimeoutError",
    "UnsupportedProtocolVersion",
    "User",
    "UsernameRequired",
    "__version__",
    "derive_response",
    "parse_challenge",
]
