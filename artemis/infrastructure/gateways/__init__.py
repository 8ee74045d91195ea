"""
Gateways Package - Infrastructure Layer

HTTP implementations of the domain gateway interfaces.
"""

from .base import HTTPGateway
from .firetv_gateway import FireTVRemoteGateway
from .govee_gateway import GoveeLightGateway, build_light_gateways
from .wyze_bridge_gateway import WyzeBridgeGateway

__all__ = [
    "FireTVRemoteGateway",
    "GoveeLightGateway",
    "HTTPGateway",
    "WyzeBridgeGateway",
    "build_light_gateways",
]
