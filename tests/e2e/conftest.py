from __future__ import annotations

from typing import Dict, List, Optional

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from artemis.domain.entities.camera import CameraEntry
from artemis.domain.entities.errors import NotFoundError
from artemis.domain.entities.light import LightDevice, LightState
from artemis.domain.entities.remote import (
    DiscoveredRemoteDevice,
    DiscoveryResult,
    PairingPhase,
    PairResult,
    RemoteCommandResult,
)
from artemis.domain.services.light_commands import ensure_brightness, ensure_color
from artemis.main.app import create_app
from artemis.main.container import get_container


class FakeLightGateway:
    def __init__(self, devices: List[LightDevice], error: Exception = None):
        self.devices = devices
        self.error = error
        self.calls: List[tuple] = []

    async def list_devices(self) -> List[LightDevice]:
        if self.error is not None:
            raise self.error
        return list(self.devices)

    async def set_power(self, device_id: str, model: str, on: bool) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append(("turn", device_id, on))

    async def set_brightness(self, device_id: str, model: str, level: int) -> None:
        ensure_brightness(level)
        self.calls.append(("brightness", device_id, level))

    async def set_color(self, device_id: str, model: str, r: int, g: int, b: int) -> None:
        ensure_color(r, g, b)
        self.calls.append(("color", device_id, (r, g, b)))

    async def get_state(self, device_id: str, model: str) -> LightState:
        if self.error is not None:
            raise self.error
        return LightState(device_id=device_id, model=model, is_on=False)


class FakeRemoteGateway:
    def __init__(self, error: Exception = None):
        self.error = error
        self.commands: List[tuple] = []

    async def discover(self) -> DiscoveryResult:
        if self.error is not None:
            raise self.error
        return DiscoveryResult(
            devices=[DiscoveredRemoteDevice(name="Living Room", host="192.168.1.50")],
            message="Found 1 device(s)",
        )

    async def pair(self, host: str, pin: Optional[str] = None) -> PairResult:
        phase = PairingPhase.for_pin(pin)
        if phase is PairingPhase.AWAITING_PIN:
            return PairResult(
                success=True,
                message="PIN displayed on TV",
                phase=phase,
                awaiting_pin=True,
            )
        return PairResult(success=pin == "123456", message="done", phase=phase)

    async def send_command(self, host, command, text=None, app_package=None):
        self.commands.append((host, command, text, app_package))
        return RemoteCommandResult(success=True, message="Command sent", command=command)

    async def health_check(self) -> None:
        if self.error is not None:
            raise self.error


class FakeCameraGateway:
    def __init__(self, cameras: List[CameraEntry]):
        self.cameras: Dict[str, CameraEntry] = {c.name_uri: c for c in cameras}

    async def list_cameras(self) -> List[CameraEntry]:
        return list(self.cameras.values())

    async def get_camera(self, name_uri: str) -> CameraEntry:
        if name_uri not in self.cameras:
            raise NotFoundError(f"Camera '{name_uri}' not found")
        return self.cameras[name_uri]

    async def health_check(self) -> None:
        return None


@pytest.fixture()
def gateways(sample_light, sample_camera):
    return {
        "lights": [FakeLightGateway([sample_light]), FakeLightGateway([])],
        "remote": FakeRemoteGateway(),
        "camera": FakeCameraGateway([sample_camera]),
    }


@pytest.fixture()
def client(gateways):
    app = create_app()
    container = get_container()
    container.light_gateways.override(providers.Object(gateways["lights"]))
    container.remote_gateway.override(providers.Object(gateways["remote"]))
    container.camera_gateway.override(providers.Object(gateways["camera"]))

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
