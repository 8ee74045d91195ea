"""Domain entities for the camera streaming bridge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CameraStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"

    @classmethod
    def from_flags(cls, connected: bool, enabled: bool) -> "CameraStatus":
        """A camera is online only when it is both connected and enabled."""
        return cls.ONLINE if connected and enabled else cls.OFFLINE


@dataclass(frozen=True, slots=True)
class StreamEndpoints:
    hls: str
    rtsp: str
    webrtc: str


@dataclass(frozen=True, slots=True)
class CameraEntry:
    """A camera with its derived status and playback URLs."""

    name: str
    name_uri: str
    model: str
    connected: bool
    enabled: bool
    streams: StreamEndpoints

    @property
    def status(self) -> CameraStatus:
        return CameraStatus.from_flags(self.connected, self.enabled)

    @property
    def stream_url(self) -> str:
        # HLS plays natively on the mobile client.
        return self.streams.hls
