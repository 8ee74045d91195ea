"""
Health domain entities.

Value objects for the liveness answer of ``/health`` and the upstream probe
snapshot surfaced by ``/info``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

HEALTHY = "healthy"


class ServiceStatus(str, Enum):
    """Availability of an upstream or of the gateway as a whole."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing a single upstream."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)


@dataclass(slots=True)
class ApplicationInfo:
    """Operational metadata surfaced by the /info endpoint."""

    name: str
    version: str
    environment: str
    git_commit: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    light_accounts: int
    dependencies: List[DependencyStatus] = field(default_factory=list)
