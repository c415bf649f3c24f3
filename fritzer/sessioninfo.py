"""Session document returned by the FRITZ!Box login endpoint.

>>> info = SessionInfo.from_xml(
...     "<SessionInfo><SID>0000000000000000</SID>"
...     "<Challenge>2$10000$5a1711$2000$5a1722</Challenge><BlockTime>0</BlockTime>"
...     '<Users><User last="1">fritz3456</User></Users></SessionInfo>'
... )
>>> info.is_valid
False
>>> info.last_user.username
'fritz3456'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

from .challenge import Challenge, parse_challenge
from .exceptions import ConnectivityError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

_LOGGER = logging.getLogger(__name__)

#: Session id handed out by the box for unauthenticated sessions
INVALID_SID = "0000000000000000"


@dataclass
class User:
    """A user entry of the session document."""

    username: str
    #: True if the box flags this user as the last one logged in
    last: bool = False


@dataclass
class SessionInfo:
    """Parsed ``SessionInfo`` document of the login endpoint."""

    sid: str
    challenge: str = ""
    block_time: int = 0
    users: list[User] = field(default_factory=list)
    rights: dict[str, int] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Return True if the session id is an authenticated one."""
        return bool(self.sid) and self.sid != INVALID_SID

    @property
    def last_user(self) -> User | None:
        """Return the first user flagged as last logged in."""
        return next((user for user in self.users if user.last), None)

    @property
    def parsed_challenge(self) -> Challenge:
        """Return the parsed challenge of this document."""
        return parse_challenge(self.challenge)

    @classmethod
    def from_xml(cls, text: str) -> SessionInfo:
        """Parse the xml session document."""
        try:
            root = ElementTree.fromstring(text)
        except (ElementTree.ParseError, DefusedXmlException) as ex:
            raise ConnectivityError(
                f"Unable to parse session document: {ex}", ex
            ) from ex

        sid = root.findtext("SID")
        if sid is None:
            raise ConnectivityError("Session document has no SID")

        block_time = root.findtext("BlockTime") or "0"
        try:
            block_time_secs = int(block_time)
        except ValueError:
            _LOGGER.debug("Ignoring unexpected block time %r", block_time)
            block_time_secs = 0

        return cls(
            sid=sid.strip(),
            challenge=(root.findtext("Challenge") or "").strip(),
            block_time=block_time_secs,
            users=_parse_users(root.find("Users")),
            rights=_parse_rights(root.find("Rights")),
        )


def _parse_users(users: Element | None) -> list[User]:
    if users is None:
        return []
    return [
        User(username=(user.text or "").strip(), last=user.get("last") == "1")
        for user in users.findall("User")
    ]


def _parse_rights(rights: Element | None) -> dict[str, int]:
    """Parse the alternating ``Name``/``Access`` children of ``Rights``."""
    if rights is None:
        return {}
    parsed: dict[str, int] = {}
    name: str | None = None
    for child in rights:
        if child.tag == "Name":
            name = (child.text or "").strip()
        elif child.tag == "Access" and name is not None:
            try:
                parsed[name] = int(child.text or "0")
            except ValueError:
                _LOGGER.debug("Ignoring access level %r for %s", child.text, name)
            name = None
    return parsed
