"""Normalization of camera bridge payloads and stream URL derivation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping
from urllib.parse import urlsplit

from artemis.domain.entities.camera import CameraEntry, StreamEndpoints

from .extractors import as_mapping, first_match, flags, texts

DEFAULT_CAMERA_MODEL = "Wyze Camera"

DISPLAY_NAME_FIELDS = texts("nickname", "name")
NAME_URI_FIELDS = texts("name_uri")
MODEL_FIELDS = texts("model_name", "product_model", "model")
CONNECTED_FIELDS = flags("connected")
ENABLED_FIELDS = flags("enabled")


@dataclass(frozen=True)
class StreamPorts:
    """Ports the bridge re-streams on, one per protocol."""

    hls: int = 8888
    rtsp: int = 8554
    webrtc: int = 8889


def bridge_host(bridge_url: str) -> str:
    """Hostname of the bridge without scheme, port or path.

    >>> bridge_host("http://192.168.1.100:5050")
    '192.168.1.100'
    """
    candidate = bridge_url if "://" in bridge_url else f"http://{bridge_url}"
    return urlsplit(candidate).hostname or ""


def build_stream_endpoints(
    host: str, name_uri: str, ports: StreamPorts = StreamPorts()
) -> StreamEndpoints:
    return StreamEndpoints(
        hls=f"http://{host}:{ports.hls}/{name_uri}/stream.m3u8",
        rtsp=f"rtsp://{host}:{ports.rtsp}/{name_uri}",
        webrtc=f"http://{host}:{ports.webrtc}/{name_uri}/",
    )


def normalize_camera(
    scan_key: str,
    payload: Any,
    host: str,
    ports: StreamPorts = StreamPorts(),
) -> CameraEntry:
    """Map one bridge entry; ``scan_key`` stands in for a missing name URI."""
    data = as_mapping(payload)
    name_uri = first_match(data, NAME_URI_FIELDS, default=scan_key)
    return CameraEntry(
        name=first_match(data, DISPLAY_NAME_FIELDS, default=name_uri),
        name_uri=name_uri,
        model=first_match(data, MODEL_FIELDS, default=DEFAULT_CAMERA_MODEL),
        connected=first_match(data, CONNECTED_FIELDS, default=False),
        enabled=first_match(data, ENABLED_FIELDS, default=False),
        streams=build_stream_endpoints(host, name_uri, ports),
    )


def normalize_cameras(
    body: Any, host: str, ports: StreamPorts = StreamPorts()
) -> List[CameraEntry]:
    """Map the bridge's object keyed by camera name, keeping its key order."""
    payload: Mapping[str, Any] = as_mapping(body)
    return [
        normalize_camera(str(key), entry, host, ports)
        for key, entry in payload.items()
    ]
