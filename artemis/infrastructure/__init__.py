"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: HTTP adapters for each upstream, the response normalizers
they use and the upstream health probing service.
"""

from artemis.infrastructure import gateways, normalizers, services

__all__ = ["gateways", "normalizers", "services"]
