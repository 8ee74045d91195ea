"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .base_dto import CamelModel, EnvelopeDTO, ErrorResponseDTO
from .camera_dto import (
    CameraDTO,
    CamerasResponseDTO,
    CameraStreamResponseDTO,
    StreamEndpointsDTO,
)
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, HealthStatusDTO
from .light_dto import (
    ColorDTO,
    LightControlRequestDTO,
    LightControlResponseDTO,
    LightDeviceDTO,
    LightDevicesResponseDTO,
    LightStateResponseDTO,
)
from .remote_dto import (
    DiscoveredRemoteDeviceDTO,
    PairRequestDTO,
    PairResponseDTO,
    RemoteCommandRequestDTO,
    RemoteCommandResponseDTO,
    RemoteDiscoveryResponseDTO,
)

__all__ = [
    "CamelModel",
    "EnvelopeDTO",
    "ErrorResponseDTO",
    "CameraDTO",
    "CamerasResponseDTO",
    "CameraStreamResponseDTO",
    "StreamEndpointsDTO",
    "ApplicationInfoDTO",
    "DependencyStatusDTO",
    "HealthStatusDTO",
    "ColorDTO",
    "LightControlRequestDTO",
    "LightControlResponseDTO",
    "LightDeviceDTO",
    "LightDevicesResponseDTO",
    "LightStateResponseDTO",
    "DiscoveredRemoteDeviceDTO",
    "PairRequestDTO",
    "PairResponseDTO",
    "RemoteCommandRequestDTO",
    "RemoteCommandResponseDTO",
    "RemoteDiscoveryResponseDTO",
]
