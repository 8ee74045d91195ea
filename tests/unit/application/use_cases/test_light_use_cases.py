from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import List, Optional, Tuple

import httpx
import pytest

from artemis.application.dtos.light_dto import LightControlRequestDTO
from artemis.application.use_cases.light_use_cases import (
    ControlLightUseCase,
    GetLightStateUseCase,
    ListLightDevicesUseCase,
)
from artemis.domain.entities.errors import (
    InvalidSelectorError,
    InvalidValueError,
    OutOfRangeError,
    UnreachableError,
    UnsupportedCommandError,
    UpstreamError,
)
from artemis.domain.entities.light import LightDevice, LightState
from artemis.domain.gateways.light_gateway import ILightGateway
from artemis.domain.services.light_commands import ensure_brightness, ensure_color
from artemis.infrastructure.gateways.govee_gateway import build_light_gateways


class _FakeLightGateway(ILightGateway):
    def __init__(
        self,
        devices: Optional[List[LightDevice]] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self._devices = devices or []
        self._error = error
        self._delay = delay
        self.calls: List[Tuple] = []

    async def list_devices(self) -> List[LightDevice]:
        await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return list(self._devices)

    async def set_power(self, device_id: str, model: str, on: bool) -> None:
        self.calls.append(("power", device_id, model, on))

    async def set_brightness(self, device_id: str, model: str, level: int) -> None:
        ensure_brightness(level)
        self.calls.append(("brightness", device_id, model, level))

    async def set_color(self, device_id: str, model: str, r: int, g: int, b: int) -> None:
        ensure_color(r, g, b)
        self.calls.append(("color", device_id, model, (r, g, b)))

    async def get_state(self, device_id: str, model: str) -> LightState:
        if self._error is not None:
            raise self._error
        return LightState(device_id=device_id, model=model, is_on=True, brightness=80)


def _request(command: str, value, api_key_index: int = 0) -> LightControlRequestDTO:
    return LightControlRequestDTO(
        deviceId="AA:BB",
        model="H6159",
        command=command,
        value=value,
        apiKeyIndex=api_key_index,
    )


@pytest.mark.asyncio
async def test_aggregator_merges_accounts_in_configured_order(sample_light) -> None:
    other = replace(sample_light, device_id="CC:DD", name="Bedroom")
    slow_primary = _FakeLightGateway([sample_light], delay=0.02)
    fast_secondary = _FakeLightGateway([other])

    response = await ListLightDevicesUseCase([slow_primary, fast_secondary]).execute()

    assert [d.id for d in response.devices] == ["AA:BB:CC:DD:EE:FF:00:11", "CC:DD"]
    assert [d.api_key_index for d in response.devices] == [0, 1]
    assert response.count == 2
    assert response.success is True


@pytest.mark.asyncio
async def test_aggregator_skips_failing_accounts(sample_light) -> None:
    failing = _FakeLightGateway(error=UpstreamError(401, "Invalid API key", "govee"))
    healthy = _FakeLightGateway([sample_light])

    response = await ListLightDevicesUseCase([failing, healthy]).execute()

    assert response.count == 1
    assert response.devices[0].api_key_index == 1


@pytest.mark.asyncio
async def test_aggregator_with_all_accounts_failing_is_empty() -> None:
    failing = _FakeLightGateway(
        error=UnreachableError(httpx.ConnectError("down"), "govee")
    )

    response = await ListLightDevicesUseCase([failing]).execute()

    assert response.devices == []
    assert response.message == "Found 0 device(s)"


@pytest.mark.asyncio
async def test_aggregator_without_accounts() -> None:
    response = await ListLightDevicesUseCase([]).execute()

    assert response.count == 0


@pytest.mark.asyncio
async def test_aggregator_does_not_deduplicate(sample_light) -> None:
    gateways = [_FakeLightGateway([sample_light]), _FakeLightGateway([sample_light])]

    response = await ListLightDevicesUseCase(gateways).execute()

    assert [d.api_key_index for d in response.devices] == [0, 1]


@pytest.mark.asyncio
async def test_router_dispatches_to_selected_account() -> None:
    primary, secondary = _FakeLightGateway(), _FakeLightGateway()
    use_case = ControlLightUseCase([primary, secondary])

    response = await use_case.execute(_request("turn", False, api_key_index=1))

    assert primary.calls == []
    assert secondary.calls == [("power", "AA:BB", "H6159", False)]
    assert response.device_id == "AA:BB"
    assert response.command == "turn"
    assert response.message == "Device controlled successfully"


@pytest.mark.asyncio
async def test_router_truncates_brightness_and_parses_color() -> None:
    gateway = _FakeLightGateway()
    use_case = ControlLightUseCase([gateway])

    await use_case.execute(_request("brightness", 55.8))
    await use_case.execute(_request("color", {"r": 1, "g": 2, "b": 3}))

    assert gateway.calls == [
        ("brightness", "AA:BB", "H6159", 55),
        ("color", "AA:BB", "H6159", (1, 2, 3)),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("index", [-1, 2, 10])
async def test_router_rejects_unknown_account(index: int) -> None:
    gateways = [_FakeLightGateway(), _FakeLightGateway()]

    with pytest.raises(InvalidSelectorError):
        await ControlLightUseCase(gateways).execute(_request("turn", True, index))

    assert all(g.calls == [] for g in gateways)


@pytest.mark.asyncio
async def test_router_checks_selector_before_command() -> None:
    with pytest.raises(InvalidSelectorError):
        await ControlLightUseCase([]).execute(_request("dance", True))


@pytest.mark.asyncio
async def test_router_rejects_unknown_command() -> None:
    gateway = _FakeLightGateway()

    with pytest.raises(UnsupportedCommandError):
        await ControlLightUseCase([gateway]).execute(_request("dance", True))

    assert gateway.calls == []


@pytest.mark.asyncio
async def test_router_rejects_mismatched_value_before_any_call() -> None:
    gateway = _FakeLightGateway()

    with pytest.raises(InvalidValueError):
        await ControlLightUseCase([gateway]).execute(_request("turn", "on"))

    assert gateway.calls == []


@pytest.mark.asyncio
async def test_router_propagates_range_errors_unchanged() -> None:
    gateway = _FakeLightGateway()

    with pytest.raises(OutOfRangeError):
        await ControlLightUseCase([gateway]).execute(_request("brightness", 150))

    assert gateway.calls == []


@pytest.mark.asyncio
async def test_get_state_reports_power() -> None:
    response = await GetLightStateUseCase([_FakeLightGateway()]).execute("AA:BB", "H6159")

    assert response.is_on is True
    assert response.brightness == 80
    assert response.message == "Device is on"


@pytest.mark.asyncio
async def test_get_state_validates_account_index() -> None:
    with pytest.raises(InvalidSelectorError):
        await GetLightStateUseCase([_FakeLightGateway()]).execute("AA:BB", "H6159", 1)


@pytest.mark.asyncio
async def test_aggregator_generated_ids_are_unique_per_account(http_stub) -> None:
    id_less = {"code": 200, "data": {"devices": [{"model": "H1"}]}}
    http_stub.json(200, id_less).json(200, id_less)
    gateways = build_light_gateways(["first", "second"], base_url="https://govee.test")

    response = await ListLightDevicesUseCase(gateways).execute()

    assert [(d.id, d.api_key_index) for d in response.devices] == [
        ("account0-device0", 0),
        ("account1-device0", 1),
    ]
