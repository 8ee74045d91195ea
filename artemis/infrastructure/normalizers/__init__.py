"""
Normalizers Package - Infrastructure Layer

Pure functions turning each upstream's native JSON into domain entities.
Optional fields fall back through an ordered list of candidate keys before a
default applies; only missing identity fields are substituted from context.
"""

from .firetv import (
    normalize_command_result,
    normalize_discovery,
    normalize_pair_result,
)
from .govee import normalize_light_devices, normalize_light_state
from .wyze import StreamPorts, bridge_host, normalize_camera, normalize_cameras

__all__ = [
    "normalize_command_result",
    "normalize_discovery",
    "normalize_pair_result",
    "normalize_light_devices",
    "normalize_light_state",
    "StreamPorts",
    "bridge_host",
    "normalize_camera",
    "normalize_cameras",
]
