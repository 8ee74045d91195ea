"""Domain service abstraction for upstream health probing."""

from __future__ import annotations

from typing import Protocol

from artemis.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for probing the upstream services."""

    async def evaluate(self) -> SystemHealth:
        """Probe every upstream that exposes a health check and aggregate."""
        ...
