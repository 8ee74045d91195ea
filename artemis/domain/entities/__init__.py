"""
Domain Entities Package

Value objects reconstructed on every request; nothing here is cached or
persisted between requests.
"""

from .camera import CameraEntry, CameraStatus, StreamEndpoints
from .errors import (
    DomainError,
    GatewayError,
    InvalidInputError,
    InvalidSelectorError,
    InvalidValueError,
    NotFoundError,
    OutOfRangeError,
    UnreachableError,
    UnsupportedCommandError,
    UpstreamError,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .light import (
    BrightnessCommand,
    ColorCommand,
    ColorValue,
    LightCommand,
    LightCommandName,
    LightDevice,
    LightState,
    PowerCommand,
)
from .remote import (
    DiscoveredRemoteDevice,
    DiscoveryResult,
    PairingPhase,
    PairResult,
    RemoteCommandResult,
)

__all__ = [
    "CameraEntry",
    "CameraStatus",
    "StreamEndpoints",
    "DomainError",
    "GatewayError",
    "InvalidInputError",
    "InvalidSelectorError",
    "InvalidValueError",
    "NotFoundError",
    "OutOfRangeError",
    "UnreachableError",
    "UnsupportedCommandError",
    "UpstreamError",
    "ApplicationInfo",
    "DependencyStatus",
    "ServiceStatus",
    "SystemHealth",
    "BrightnessCommand",
    "ColorCommand",
    "ColorValue",
    "LightCommand",
    "LightCommandName",
    "LightDevice",
    "LightState",
    "PowerCommand",
    "DiscoveredRemoteDevice",
    "DiscoveryResult",
    "PairingPhase",
    "PairResult",
    "RemoteCommandResult",
]
