"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers translate domain errors into
HTTP errors; the app-level handlers render them into the envelope.
"""

from .cameras_controller import router as cameras_router
from .lights_controller import router as lights_router
from .remote_controller import router as remote_router
from .system_controller import router as system_router

__all__ = ["cameras_router", "lights_router", "remote_router", "system_router"]
