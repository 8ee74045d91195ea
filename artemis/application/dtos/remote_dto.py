"""
Remote DTOs - Application Layer

Request and response schemas for TV remote discovery, pairing and commands.
"""

from typing import List, Optional

from pydantic import ConfigDict, Field

from artemis.domain.entities.remote import (
    DiscoveredRemoteDevice,
    DiscoveryResult,
    PairingPhase,
    PairResult,
    RemoteCommandResult,
)

from .base_dto import CamelModel, EnvelopeDTO


class DiscoveredRemoteDeviceDTO(CamelModel):
    name: str = Field(description="Advertised device name")
    host: str = Field(description="LAN address of the device")
    port: int = Field(description="Remote protocol port")
    model: Optional[str] = Field(default=None, description="Model, when advertised")

    @classmethod
    def from_domain(cls, device: DiscoveredRemoteDevice) -> "DiscoveredRemoteDeviceDTO":
        return cls(
            name=device.name, host=device.host, port=device.port, model=device.model
        )


class RemoteDiscoveryResponseDTO(EnvelopeDTO):
    count: int
    devices: List[DiscoveredRemoteDeviceDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: DiscoveryResult) -> "RemoteDiscoveryResponseDTO":
        return cls(
            message=result.message,
            count=len(result.devices),
            devices=[DiscoveredRemoteDeviceDTO.from_domain(d) for d in result.devices],
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Found 1 device(s)",
                "timestamp": "2025-01-15T12:00:00Z",
                "count": 1,
                "devices": [
                    {
                        "name": "Living Room Fire TV",
                        "host": "192.168.1.50",
                        "port": 6466,
                        "model": "AFTMM",
                    }
                ],
            }
        }
    )


class PairRequestDTO(CamelModel):
    """Omitting ``pin`` starts pairing; sending it completes pairing."""

    host: str = Field(min_length=1, description="Address of the device to pair")
    pin: Optional[str] = Field(default=None, description="PIN shown on the TV")


class PairResponseDTO(EnvelopeDTO):
    phase: PairingPhase = Field(description="Handshake phase that was executed")
    awaiting_pin: bool = Field(description="True while the TV displays a PIN")
    device_name: Optional[str] = Field(default=None, description="Paired device name")

    @classmethod
    def from_domain(cls, result: PairResult) -> "PairResponseDTO":
        return cls(
            success=result.success,
            message=result.message,
            phase=result.phase,
            awaiting_pin=result.awaiting_pin,
            device_name=result.device_name,
        )


class RemoteCommandRequestDTO(CamelModel):
    host: str = Field(min_length=1, description="Address of a paired device")
    command: str = Field(min_length=1, description="Key name, text_input or launch_app")
    text: Optional[str] = Field(default=None, description="Text for text_input")
    app_package: Optional[str] = Field(
        default=None, description="Android package for launch_app"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "host": "192.168.1.50",
                "command": "launch_app",
                "appPackage": "com.netflix.ninja",
            }
        }
    )


class RemoteCommandResponseDTO(EnvelopeDTO):
    command: str = Field(description="Echo of the executed command")

    @classmethod
    def from_domain(cls, result: RemoteCommandResult) -> "RemoteCommandResponseDTO":
        return cls(success=result.success, message=result.message, command=result.command)
