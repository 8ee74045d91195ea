"""Camera streaming bridge gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from artemis.domain.entities.camera import CameraEntry
from artemis.domain.entities.errors import NotFoundError, UpstreamError
from artemis.domain.gateways.camera_gateway import ICameraBridgeGateway
from artemis.infrastructure.normalizers.wyze import (
    StreamPorts,
    bridge_host,
    normalize_camera,
    normalize_cameras,
)
from artemis.shared import get_logger
from artemis.shared.consts import EnumUpstream

from .base import HTTPGateway

logger = get_logger(__name__)

WYZE_BRIDGE_URL = "http://localhost:5050"
CAMERAS_ENDPOINT = "/api/"
NOT_FOUND_STATUS = 404


class WyzeBridgeGateway(HTTPGateway, ICameraBridgeGateway):
    """HTTP client for the local camera bridge's JSON API."""

    upstream = EnumUpstream.WYZE_BRIDGE.value

    def __init__(
        self,
        bridge_url: str = WYZE_BRIDGE_URL,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        stream_ports: StreamPorts = StreamPorts(),
    ):
        """
        Initialize the bridge gateway.

        Args:
            bridge_url: Base URL of the bridge web UI and API
            api_key: Optional bridge API key, sent as the ``api`` query parameter
            timeout: Request timeout in seconds
            stream_ports: Ports the bridge re-streams on
        """
        super().__init__(bridge_url, timeout)
        self._api_key = api_key
        self._host = bridge_host(bridge_url)
        self._ports = stream_ports

    def _params(self) -> Optional[Dict[str, Any]]:
        return {"api": self._api_key} if self._api_key else None

    async def list_cameras(self) -> List[CameraEntry]:
        response = await self._request(
            "GET", CAMERAS_ENDPOINT, event="wyze.cameras", params=self._params()
        )
        cameras = normalize_cameras(
            self._decode(response, event="wyze.cameras"), self._host, self._ports
        )
        logger.info(
            "wyze.cameras.listed",
            count=len(cameras),
            online=sum(1 for camera in cameras if camera.connected and camera.enabled),
        )
        return cameras

    async def get_camera(self, name_uri: str) -> CameraEntry:
        path = f"{CAMERAS_ENDPOINT}{quote(name_uri, safe='')}"
        try:
            response = await self._request(
                "GET", path, event="wyze.camera", params=self._params()
            )
        except UpstreamError as e:
            if e.status == NOT_FOUND_STATUS:
                raise NotFoundError(
                    f"Camera '{name_uri}' not found", {"name": name_uri}
                ) from e
            raise

        return normalize_camera(
            name_uri,
            self._decode(response, event="wyze.camera"),
            self._host,
            self._ports,
        )

    async def health_check(self) -> None:
        await self._request(
            "GET", CAMERAS_ENDPOINT, event="wyze.health", params=self._params()
        )
