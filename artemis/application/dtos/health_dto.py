"""DTOs for liveness and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from artemis.domain.entities.health import (
    HEALTHY,
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
)
from artemis.shared.consts import SERVICE_NAME

from .base_dto import CamelModel, EnvelopeDTO


class HealthStatusDTO(EnvelopeDTO):
    """Fixed liveness answer; upstreams are never probed for it."""

    message: str = Field(default="Service is healthy", description="Fixed message")
    status: str = Field(default=HEALTHY, description="Always healthy")
    service: str = Field(default=SERVICE_NAME, description="Service identifier")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Service is healthy",
                "timestamp": "2025-01-15T12:00:00Z",
                "status": "healthy",
                "service": "artemis",
            }
        }
    )


class DependencyStatusDTO(CamelModel):
    """Serializable representation of an upstream probe."""

    name: str = Field(description="Upstream identifier")
    status: ServiceStatus = Field(description="Probe outcome")
    message: Optional[str] = Field(default=None, description="Human readable note")
    checked_at: datetime = Field(description="Timestamp of the probe")
    latency_ms: Optional[float] = Field(default=None, description="Latency in ms")
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class ApplicationInfoDTO(EnvelopeDTO):
    """DTO representing metadata returned by /info."""

    name: str = Field(description="Application name")
    version: str = Field(description="Application version")
    environment: str = Field(description="Current deployment environment")
    git_commit: str = Field(description="Git commit hash")
    started_at: datetime = Field(description="Application start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    status: ServiceStatus = Field(description="Aggregated upstream status")
    light_accounts: int = Field(description="Configured light API accounts")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    upstreams: Dict[str, str] = Field(
        default_factory=dict, description="Configured upstream URLs"
    )

    @classmethod
    def from_domain(
        cls, info: ApplicationInfo, upstreams: Optional[Dict[str, str]] = None
    ) -> "ApplicationInfoDTO":
        return cls(
            message=f"{info.name} {info.version} is running",
            name=info.name,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            light_accounts=info.light_accounts,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in info.dependencies
            ],
            upstreams=upstreams or {},
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Artemis Gateway 1.0.0 is running",
                "name": "Artemis Gateway",
                "version": "1.0.0",
                "environment": "development",
                "gitCommit": "abcdef1",
                "startedAt": "2025-01-15T12:00:00Z",
                "uptimeSeconds": 3600.5,
                "status": "up",
                "lightAccounts": 2,
                "dependencies": [
                    {
                        "name": "firetv",
                        "status": "up",
                        "message": "Health check successful",
                        "checkedAt": "2025-01-15T13:00:00Z",
                        "latencyMs": 4.2,
                        "details": {},
                    }
                ],
                "upstreams": {
                    "firetv": "http://localhost:9090",
                    "wyze_bridge": "http://localhost:5050",
                },
            }
        }
    )
