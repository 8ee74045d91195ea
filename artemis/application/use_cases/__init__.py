"""
Use Cases Package - Application Layer

Use cases orchestrate the gateways and turn domain results into the stable
response DTOs.
"""

from .camera_use_cases import GetCameraStreamUseCase, ListCamerasUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .light_use_cases import (
    ControlLightUseCase,
    GetLightStateUseCase,
    ListLightDevicesUseCase,
)
from .remote_use_cases import (
    DiscoverRemoteDevicesUseCase,
    PairRemoteDeviceUseCase,
    SendRemoteCommandUseCase,
)

__all__ = [
    "GetCameraStreamUseCase",
    "ListCamerasUseCase",
    "GetApplicationInfoUseCase",
    "GetHealthStatusUseCase",
    "ControlLightUseCase",
    "GetLightStateUseCase",
    "ListLightDevicesUseCase",
    "DiscoverRemoteDevicesUseCase",
    "PairRemoteDeviceUseCase",
    "SendRemoteCommandUseCase",
]
