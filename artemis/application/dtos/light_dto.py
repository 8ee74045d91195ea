"""
Light DTOs - Application Layer

Request and response schemas for the cloud light endpoints.
"""

from typing import Any, List, Optional

from pydantic import ConfigDict, Field

from artemis.domain.entities.light import ColorValue, LightDevice, LightState

from .base_dto import CamelModel, EnvelopeDTO


class ColorDTO(CamelModel):
    r: int = Field(description="Red channel (0-255)")
    g: int = Field(description="Green channel (0-255)")
    b: int = Field(description="Blue channel (0-255)")

    @classmethod
    def from_domain(cls, color: ColorValue) -> "ColorDTO":
        return cls(r=color.r, g=color.g, b=color.b)


class LightDeviceDTO(CamelModel):
    """DTO for one light in the aggregated device list."""

    id: str = Field(description="Device identifier (MAC-like)")
    name: str = Field(description="User friendly name")
    model: str = Field(description="Device model, required by control calls")
    type: str = Field(description="Device type")
    capabilities: List[str] = Field(
        default_factory=list, description="Commands the device supports"
    )
    controllable: bool = Field(default=True, description="Accepts control commands")
    retrievable: bool = Field(default=True, description="Reports its state")
    api_key_index: int = Field(description="Account that owns the device")

    @classmethod
    def from_domain(cls, device: LightDevice) -> "LightDeviceDTO":
        return cls(
            id=device.device_id,
            name=device.name,
            model=device.model,
            type=device.device_type,
            capabilities=list(device.capabilities),
            controllable=device.controllable,
            retrievable=device.retrievable,
            api_key_index=device.account_index,
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "AA:BB:CC:DD:EE:FF:00:11",
                "name": "Living Room Lamp",
                "model": "H6159",
                "type": "light",
                "capabilities": ["turn", "brightness", "color"],
                "controllable": True,
                "retrievable": True,
                "apiKeyIndex": 0,
            }
        }
    )


class LightDevicesResponseDTO(EnvelopeDTO):
    count: int = Field(description="Number of devices across all accounts")
    devices: List[LightDeviceDTO] = Field(default_factory=list)


class LightControlRequestDTO(CamelModel):
    """
    Body of a control request.

    ``value`` stays untyped here; its shape is checked against ``command``
    by the command parser so that a mismatch reports which command failed.
    """

    device_id: str = Field(min_length=1, description="Target device identifier")
    model: str = Field(min_length=1, description="Target device model")
    command: str = Field(description="One of turn, brightness, color")
    value: Any = Field(default=None, description="bool, number or {r, g, b}")
    api_key_index: int = Field(default=0, description="Account that owns the device")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "deviceId": "AA:BB:CC:DD:EE:FF:00:11",
                "model": "H6159",
                "command": "color",
                "value": {"r": 255, "g": 120, "b": 0},
                "apiKeyIndex": 0,
            }
        }
    )


class LightControlResponseDTO(EnvelopeDTO):
    device_id: str = Field(description="Device that was controlled")
    command: str = Field(description="Command that was executed")


class LightStateResponseDTO(EnvelopeDTO):
    device_id: str
    model: str
    is_on: bool = Field(description="Power state; unknown is reported as off")
    online: Optional[bool] = None
    brightness: Optional[int] = None
    color: Optional[ColorDTO] = None

    @classmethod
    def from_domain(cls, state: LightState, message: str) -> "LightStateResponseDTO":
        return cls(
            message=message,
            device_id=state.device_id,
            model=state.model,
            is_on=state.is_on,
            online=state.online,
            brightness=state.brightness,
            color=ColorDTO.from_domain(state.color) if state.color else None,
        )
