"""Implementation of the FRITZ!Box PBKDF2 login challenge.

The box hands out a challenge of the form::

    2$<iter1>$<salt1>$<iter2>$<salt2>

The client answers with ``<salt2>$<hash2>`` where

    hash1 = pbkdf2_hmac_sha256(password, salt1, iter1)
    hash2 = pbkdf2_hmac_sha256(hash1, salt2, iter2)

The second round is keyed with the raw bytes of hash1, not its hex text.
The ``$`` separator of the answer is sent url-encoded as ``%24``.

https://avm.de/fileadmin/user_upload/Global/Service/Schnittstellen/AVM_Technical_Note_-_Session_ID_deutsch_2021-05-03.pdf
"""

from __future__ import annotations

import hashlib
import logging
import string
from dataclasses import dataclass, field

from .exceptions import MalformedChallenge, UnsupportedProtocolVersion

_LOGGER = logging.getLogger(__name__)

SUPPORTED_VERSION = "2"
CHALLENGE_SEPARATOR = "$"
RESPONSE_SEPARATOR = "%24"
CREDENTIAL_LEN = hashlib.sha256().digest_size


def _pbkdf2_sha256(secret: bytes, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", secret, salt, iterations, CREDENTIAL_LEN)


@dataclass(frozen=True)
class Challenge:
    """Parameters of a version 2 login challenge."""

    version: str
    iterations1: int
    salt1: bytes = field(repr=False)
    iterations2: int
    salt2: bytes = field(repr=False)
    #: Salt of the second round as written by the box, echoed in the response
    salt2_text: str = field(repr=False)

    @classmethod
    def parse(cls, raw: str) -> Challenge:
        """Parse the challenge string handed out by the box."""
        fields = raw.split(CHALLENGE_SEPARATOR)
        if len(fields) != 5:
            raise MalformedChallenge(
                f"Expected 5 '{CHALLENGE_SEPARATOR}' separated fields "
                + f"but got {len(fields)}",
                challenge=raw,
            )

        version, iter1, salt1, iter2, salt2 = fields
        if version != SUPPORTED_VERSION:
            raise UnsupportedProtocolVersion(
                f"Unsupported login protocol version {version!r}", challenge=raw
            )

        return cls(
            version=version,
            iterations1=_parse_iterations(iter1, raw),
            salt1=_parse_salt(salt1, raw),
            iterations2=_parse_iterations(iter2, raw),
            salt2=_parse_salt(salt2, raw),
            salt2_text=salt2,
        )

    def solve(self, password: str) -> str:
        """Return the login response for password."""
        return derive_response(self, password)


def _parse_iterations(value: str, raw: str) -> int:
    if not (value.isascii() and value.isdigit()) or (iterations := int(value)) <= 0:
        raise MalformedChallenge(
            f"Invalid iteration count {value!r}, expected a positive integer",
            challenge=raw,
        )
    return iterations


def _parse_salt(value: str, raw: str) -> bytes:
    if not value:
        raise MalformedChallenge("Empty salt", challenge=raw)
    # bytes.fromhex would skip whitespace
    if len(value) % 2 or not all(char in string.hexdigits for char in value):
        raise MalformedChallenge(f"Salt {value!r} is not hex", challenge=raw)
    return bytes.fromhex(value)


def parse_challenge(raw: str) -> Challenge:
    """Parse a challenge string into a :class:`Challenge`."""
    return Challenge.parse(raw)


def derive_response(challenge: Challenge, password: str) -> str:
    """Compute the login response for the challenge and password."""
    hash1 = _pbkdf2_sha256(
        password.encode("utf-8"), challenge.salt1, challenge.iterations1
    )
    hash2 = _pbkdf2_sha256(hash1, challenge.salt2, challenge.iterations2)
    _LOGGER.debug(
        "Derived challenge response with %s/%s iterations",
        challenge.iterations1,
        challenge.iterations2,
    )
    return f"{challenge.salt2_text}{RESPONSE_SEPARATOR}{hash2.hex()}"
