"""
Light Gateway Interface - Domain Layer

Contract for one account of the cloud light API. One instance exists per
configured API key.
"""

from abc import ABC, abstractmethod
from typing import List

from artemis.domain.entities.light import LightDevice, LightState


class ILightGateway(ABC):
    """Interface for a cloud light account."""

    @abstractmethod
    async def list_devices(self) -> List[LightDevice]:
        """
        List every device registered to the account.

        Returns:
            List[LightDevice]: Devices in the order the upstream returned them,
            all tagged with account index 0; the aggregator re-tags them.

        Raises:
            GatewayError: If the upstream is unreachable or rejects the call
        """
        pass

    @abstractmethod
    async def set_power(self, device_id: str, model: str, on: bool) -> None:
        """Turn a device on or off."""
        pass

    @abstractmethod
    async def set_brightness(self, device_id: str, model: str, level: int) -> None:
        """
        Set brightness.

        Raises:
            OutOfRangeError: If level is outside 0-100; no request is sent
        """
        pass

    @abstractmethod
    async def set_color(self, device_id: str, model: str, r: int, g: int, b: int) -> None:
        """
        Set RGB color.

        Raises:
            OutOfRangeError: If any channel is outside 0-255; no request is sent
        """
        pass

    @abstractmethod
    async def get_state(self, device_id: str, model: str) -> LightState:
        """Query the current power state (and other reported properties)."""
        pass
