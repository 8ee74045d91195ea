"""
Domain Layer Package

Entities, error taxonomy, upstream gateway contracts and the pure rules for
light commands and pairing phases. Nothing here depends on a framework or on
a transport.
"""

from artemis.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
