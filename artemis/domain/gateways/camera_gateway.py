"""
Camera Bridge Gateway Interface - Domain Layer

Contract for the local streaming bridge that exposes camera metadata and
re-streams feeds over HLS, RTSP and WebRTC.
"""

from abc import ABC, abstractmethod
from typing import List

from artemis.domain.entities.camera import CameraEntry


class ICameraBridgeGateway(ABC):
    """Interface for the camera streaming bridge."""

    @abstractmethod
    async def list_cameras(self) -> List[CameraEntry]:
        """List every camera the bridge knows about."""
        pass

    @abstractmethod
    async def get_camera(self, name_uri: str) -> CameraEntry:
        """
        Fetch one camera by its URL-safe name.

        Raises:
            NotFoundError: If the bridge answers 404
        """
        pass

    @abstractmethod
    async def health_check(self) -> None:
        """Raise a GatewayError when the bridge is not healthy."""
        pass
