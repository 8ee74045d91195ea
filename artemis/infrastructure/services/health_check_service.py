"""Infrastructure implementation for upstream health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Awaitable, Callable, Dict, Iterable, List

from artemis.domain.entities.errors import GatewayError, UpstreamError
from artemis.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from artemis.domain.gateways.camera_gateway import ICameraBridgeGateway
from artemis.domain.gateways.remote_gateway import IRemoteControlGateway
from artemis.domain.ports.health_check import IHealthCheckService
from artemis.shared import get_logger
from artemis.shared.consts import EnumUpstream

logger = get_logger(__name__)

Probe = Callable[[], Awaitable[None]]


class HealthCheckService(IHealthCheckService):
    """
    Probe the local upstreams that expose a health endpoint.

    The cloud light API has none and is reported from configuration only.
    """

    def __init__(
        self,
        remote_gateway: IRemoteControlGateway,
        camera_gateway: ICameraBridgeGateway,
        light_account_count: int = 0,
    ) -> None:
        self._remote_gateway = remote_gateway
        self._camera_gateway = camera_gateway
        self._light_account_count = light_account_count

    async def evaluate(self) -> SystemHealth:
        """Run checks concurrently and aggregate system health."""
        probes: Dict[str, Probe] = {
            EnumUpstream.FIRETV.value: self._remote_gateway.health_check,
            EnumUpstream.WYZE_BRIDGE.value: self._camera_gateway.health_check,
        }

        dependency_statuses: List[DependencyStatus] = list(
            await asyncio.gather(
                *(self._probe(name, probe) for name, probe in probes.items())
            )
        )
        dependency_statuses.append(self._light_accounts_status())

        overall_status = self._aggregate_status(dependency_statuses)
        return SystemHealth(status=overall_status, dependencies=dependency_statuses)

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    async def _probe(self, name: str, probe: Probe) -> DependencyStatus:
        start = perf_counter()
        try:
            await probe()
        except UpstreamError as exc:
            latency_ms = (perf_counter() - start) * 1000
            status = ServiceStatus.DEGRADED if exc.is_client_fault else ServiceStatus.DOWN
            return DependencyStatus(
                name=name,
                status=status,
                message=f"HTTP {exc.status}: {exc.message}",
                latency_ms=latency_ms,
                details={"status_code": exc.status},
            )
        except GatewayError as exc:
            latency_ms = (perf_counter() - start) * 1000
            logger.warning("health.probe.unreachable", upstream=name, error=exc.message)
            return DependencyStatus(
                name=name,
                status=ServiceStatus.DOWN,
                message=exc.message,
                latency_ms=latency_ms,
            )

        latency_ms = (perf_counter() - start) * 1000
        return DependencyStatus(
            name=name,
            status=ServiceStatus.UP,
            message="Health check successful",
            latency_ms=latency_ms,
        )

    def _light_accounts_status(self) -> DependencyStatus:
        if not self._light_account_count:
            return DependencyStatus(
                name=EnumUpstream.GOVEE.value,
                status=ServiceStatus.UNKNOWN,
                message="No light API keys configured.",
                details={"accounts": 0},
            )
        return DependencyStatus(
            name=EnumUpstream.GOVEE.value,
            status=ServiceStatus.UP,
            message="Cloud API is not probed",
            details={"accounts": self._light_account_count},
        )
