"""Package containing the endpoint transports."""

from .basetransport import BaseTransport
from .logintransport import FritzboxLoginTransport, LoginTransport
from .switchtransport import Device, FritzboxSwitchTransport, SwitchTransport

__all__ = [
    "BaseTransport",
    "Device",
    "FritzboxLoginTransport",
    "FritzboxSwitchTransport",
    "LoginTransport",
    "SwitchTransport",
]
