"""
Camera DTOs - Application Layer

Response schemas for the camera list and stream lookup endpoints.
"""

from typing import List

from pydantic import ConfigDict, Field

from artemis.domain.entities.camera import CameraEntry, CameraStatus, StreamEndpoints

from .base_dto import CamelModel, EnvelopeDTO


class StreamEndpointsDTO(CamelModel):
    hls: str = Field(description="HLS playlist URL")
    rtsp: str = Field(description="RTSP URL")
    webrtc: str = Field(description="WebRTC page URL")

    @classmethod
    def from_domain(cls, streams: StreamEndpoints) -> "StreamEndpointsDTO":
        return cls(hls=streams.hls, rtsp=streams.rtsp, webrtc=streams.webrtc)


class CameraDTO(CamelModel):
    name: str
    name_uri: str = Field(description="URL-safe camera identifier")
    model: str
    status: CameraStatus
    enabled: bool
    stream_url: str = Field(description="Primary (HLS) stream URL")
    streams: StreamEndpointsDTO

    @classmethod
    def from_domain(cls, camera: CameraEntry) -> "CameraDTO":
        return cls(
            name=camera.name,
            name_uri=camera.name_uri,
            model=camera.model,
            status=camera.status,
            enabled=camera.enabled,
            stream_url=camera.stream_url,
            streams=StreamEndpointsDTO.from_domain(camera.streams),
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Front Door",
                "nameUri": "front-door",
                "model": "Wyze Cam v3",
                "status": "online",
                "enabled": True,
                "streamUrl": "http://192.168.1.100:8888/front-door/stream.m3u8",
                "streams": {
                    "hls": "http://192.168.1.100:8888/front-door/stream.m3u8",
                    "rtsp": "rtsp://192.168.1.100:8554/front-door",
                    "webrtc": "http://192.168.1.100:8889/front-door/",
                },
            }
        }
    )


class CamerasResponseDTO(EnvelopeDTO):
    count: int
    cameras: List[CameraDTO] = Field(default_factory=list)


class CameraStreamResponseDTO(EnvelopeDTO):
    name: str
    name_uri: str
    status: CameraStatus
    stream_url: str
    streams: StreamEndpointsDTO

    @classmethod
    def from_domain(cls, camera: CameraEntry, message: str) -> "CameraStreamResponseDTO":
        return cls(
            message=message,
            name=camera.name,
            name_uri=camera.name_uri,
            status=camera.status,
            stream_url=camera.stream_url,
            streams=StreamEndpointsDTO.from_domain(camera.streams),
        )
