"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    version: str
    environment: str
    git_commit: str
    light_accounts: int
    firetv_service_url: str
    wyze_bridge_url: str
