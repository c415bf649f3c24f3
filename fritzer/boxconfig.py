"""Configuration for connecting to a FRITZ!Box.

>>> from fritzer import BoxConfig, Credentials
>>> config = BoxConfig("fritz.box", credentials=Credentials(password="secret"))
>>> str(config.url)
'http://fritz.box/'

>>> config_dict = config.to_dict()
>>> # BoxConfig.to_dict() never contains the password
>>> print(config_dict)
{'host': 'fritz.box', 'timeout': 10, 'credentials': {'username': None}}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from aiohttp import ClientSession
from mashumaro import field_options
from mashumaro.config import BaseConfig
from mashumaro.mixins.json import DataClassJSONMixin
from mashumaro.types import SerializationStrategy
from yarl import URL

from .credentials import Credentials

_LOGGER = logging.getLogger(__name__)


class _BoxConfigBaseMixin(DataClassJSONMixin):
    """Base class for serialization mixin."""

    class Config(BaseConfig):
        """Serialization config."""

        omit_none = True


class _DoNotSerialize(SerializationStrategy):
    def serialize(self, value: Any) -> None:
        return None

    def deserialize(self, value: Any) -> None:
        return None


class _CredentialsWithoutPassword(SerializationStrategy):
    def serialize(self, value: Credentials | None) -> dict[str, str | None] | None:
        if value is None:
            return None
        return {"username": value.username}

    def deserialize(self, value: dict[str, Any] | None) -> Credentials | None:
        if value is None:
            return None
        return Credentials(username=value.get("username"))


@dataclass
class BoxConfig(_BoxConfigBaseMixin):
    """Class to represent parameters that determine how to connect to a box."""

    DEFAULT_TIMEOUT = 10
    #: Host name, IP address or base url of the box
    host: str
    #: Timeout in seconds for a single request to the box
    timeout: int | None = DEFAULT_TIMEOUT
    #: Username and password, the password is never serialized
    credentials: Credentials | None = field(
        default=None,
        metadata=field_options(serialization_strategy=_CredentialsWithoutPassword()),
    )
    #: Path of the file caching the session id, defaults to ~/.fritzer.sid
    sid_path: str | None = None

    # compare=False will be excluded from object comparison.
    #: Set a custom http_client for the box to use.
    http_client: ClientSession | None = field(
        default=None,
        compare=False,
        metadata=field_options(serialization_strategy=_DoNotSerialize()),
    )

    def __pre_serialize__(self) -> BoxConfig:
        return replace(self, http_client=None)

    @property
    def url(self) -> URL:
        """Return the base url of the box."""
        host = self.host if "://" in self.host else f"http://{self.host}"
        return URL(host).with_path("/")
