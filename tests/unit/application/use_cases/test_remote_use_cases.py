from __future__ import annotations

from typing import List, Optional

import pytest

from artemis.application.dtos.remote_dto import PairRequestDTO, RemoteCommandRequestDTO
from artemis.application.use_cases.remote_use_cases import (
    DiscoverRemoteDevicesUseCase,
    PairRemoteDeviceUseCase,
    SendRemoteCommandUseCase,
)
from artemis.domain.entities.errors import InvalidInputError
from artemis.domain.entities.remote import (
    DiscoveredRemoteDevice,
    DiscoveryResult,
    PairingPhase,
    PairResult,
    RemoteCommandResult,
)
from artemis.domain.gateways.remote_gateway import IRemoteControlGateway


class _FakeRemoteGateway(IRemoteControlGateway):
    def __init__(self) -> None:
        self.pair_calls: List[tuple] = []
        self.command_calls: List[tuple] = []

    async def discover(self) -> DiscoveryResult:
        return DiscoveryResult(
            devices=[DiscoveredRemoteDevice(name="Living Room", host="192.168.1.50")],
            message="Found 1 device(s)",
        )

    async def pair(self, host: str, pin: Optional[str] = None) -> PairResult:
        self.pair_calls.append((host, pin))
        phase = PairingPhase.for_pin(pin)
        return PairResult(
            success=True,
            message="ok",
            phase=phase,
            awaiting_pin=phase is PairingPhase.AWAITING_PIN,
            device_name=None if pin is None else "Living Room",
        )

    async def send_command(
        self,
        host: str,
        command: str,
        text: Optional[str] = None,
        app_package: Optional[str] = None,
    ) -> RemoteCommandResult:
        self.command_calls.append((host, command, text, app_package))
        return RemoteCommandResult(success=True, message="sent", command=command)

    async def health_check(self) -> None:
        return None


@pytest.mark.asyncio
async def test_discover_returns_devices() -> None:
    response = await DiscoverRemoteDevicesUseCase(_FakeRemoteGateway()).execute()

    assert response.count == 1
    assert response.devices[0].port == 6466
    assert response.message == "Found 1 device(s)"


@pytest.mark.asyncio
async def test_pair_forwards_phase_from_request() -> None:
    gateway = _FakeRemoteGateway()
    use_case = PairRemoteDeviceUseCase(gateway)

    first = await use_case.execute(PairRequestDTO(host="192.168.1.50"))
    second = await use_case.execute(PairRequestDTO(host="192.168.1.50", pin="123456"))

    assert gateway.pair_calls == [("192.168.1.50", None), ("192.168.1.50", "123456")]
    assert first.awaiting_pin is True
    assert first.phase is PairingPhase.AWAITING_PIN
    assert second.device_name == "Living Room"
    assert second.phase is PairingPhase.VERIFYING


@pytest.mark.asyncio
async def test_command_forwards_optional_fields() -> None:
    gateway = _FakeRemoteGateway()

    response = await SendRemoteCommandUseCase(gateway).execute(
        RemoteCommandRequestDTO(host="h", command="launch_app", appPackage="com.app")
    )

    assert gateway.command_calls == [("h", "launch_app", None, "com.app")]
    assert response.command == "launch_app"


@pytest.mark.asyncio
@pytest.mark.parametrize("command", ["text_input", "launch_app"])
async def test_command_requires_its_extra_field(command: str) -> None:
    gateway = _FakeRemoteGateway()

    with pytest.raises(InvalidInputError):
        await SendRemoteCommandUseCase(gateway).execute(
            RemoteCommandRequestDTO(host="h", command=command)
        )

    assert gateway.command_calls == []
