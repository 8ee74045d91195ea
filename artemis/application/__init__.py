"""
Application Layer Package

This package contains the application-specific rules: use cases that
orchestrate the gateways and the DTOs that form the stable response schema.
"""

# Re-export submodules
from artemis.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
