"""
Gateways Package - Domain Layer

Interfaces for the upstream back ends. Implementations live in the
infrastructure layer.
"""

from .camera_gateway import ICameraBridgeGateway
from .light_gateway import ILightGateway
from .remote_gateway import IRemoteControlGateway

__all__ = ["ICameraBridgeGateway", "ILightGateway", "IRemoteControlGateway"]
