"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from artemis.application.dtos.health_dto import ApplicationInfoDTO, HealthStatusDTO
from artemis.application.models import SystemInfo
from artemis.domain.entities.health import ApplicationInfo
from artemis.domain.ports.health_check import IHealthCheckService
from artemis.shared.consts import EnumUpstream


class GetHealthStatusUseCase:
    """Liveness only; answers without touching any upstream."""

    async def execute(self) -> HealthStatusDTO:
        return HealthStatusDTO()


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        info = ApplicationInfo(
            name=self._info.title,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            started_at=started,
            uptime_seconds=uptime_seconds,
            status=system_health.status,
            light_accounts=self._info.light_accounts,
            dependencies=system_health.dependencies,
        )
        upstreams = {
            EnumUpstream.FIRETV.value: self._redact_url(self._info.firetv_service_url),
            EnumUpstream.WYZE_BRIDGE.value: self._redact_url(self._info.wyze_bridge_url),
        }
        return ApplicationInfoDTO.from_domain(info, upstreams)

    def _redact_url(self, url: str) -> str:
        if not url:
            return url

        parsed = urlsplit(url)
        if parsed.username or parsed.password or parsed.query:
            hostname = parsed.hostname or ""
            port_part = f":{parsed.port}" if parsed.port else ""
            netloc = f"{hostname}{port_part}"
            return urlunsplit((parsed.scheme, netloc, parsed.path, "", ""))

        return url
