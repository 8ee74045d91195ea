"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses:
routers, error envelope handlers and request logging.
"""

from artemis.presentation import controllers

__all__ = ["controllers"]
