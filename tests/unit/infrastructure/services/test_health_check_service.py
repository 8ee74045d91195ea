from __future__ import annotations

import httpx
import pytest

from artemis.domain.entities.errors import UnreachableError, UpstreamError
from artemis.domain.entities.health import ServiceStatus
from artemis.infrastructure.services.health_check_service import HealthCheckService


class _Probe:
    def __init__(self, error: Exception | None = None):
        self._error = error
        self.calls = 0

    async def health_check(self) -> None:
        self.calls += 1
        if self._error is not None:
            raise self._error


def _by_name(health):
    return {dep.name: dep for dep in health.dependencies}


@pytest.mark.asyncio
async def test_all_upstreams_up() -> None:
    service = HealthCheckService(_Probe(), _Probe(), light_account_count=2)

    health = await service.evaluate()

    deps = _by_name(health)
    assert health.status is ServiceStatus.UP
    assert deps["firetv"].status is ServiceStatus.UP
    assert deps["firetv"].latency_ms is not None
    assert deps["govee"].details == {"accounts": 2}


@pytest.mark.asyncio
async def test_unreachable_upstream_is_down() -> None:
    remote = _Probe(UnreachableError(httpx.ConnectError("refused"), "firetv"))
    service = HealthCheckService(remote, _Probe(), light_account_count=1)

    health = await service.evaluate()

    assert health.status is ServiceStatus.DOWN
    assert _by_name(health)["firetv"].status is ServiceStatus.DOWN


@pytest.mark.asyncio
async def test_client_fault_is_degraded() -> None:
    camera = _Probe(UpstreamError(401, "api key required", "wyze_bridge"))
    service = HealthCheckService(_Probe(), camera, light_account_count=1)

    health = await service.evaluate()

    bridge = _by_name(health)["wyze_bridge"]
    assert health.status is ServiceStatus.DEGRADED
    assert bridge.status is ServiceStatus.DEGRADED
    assert bridge.details == {"status_code": 401}


@pytest.mark.asyncio
async def test_missing_light_keys_is_unknown() -> None:
    service = HealthCheckService(_Probe(), _Probe(), light_account_count=0)

    health = await service.evaluate()

    assert health.status is ServiceStatus.UNKNOWN
    assert _by_name(health)["govee"].status is ServiceStatus.UNKNOWN
