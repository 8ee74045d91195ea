"""
Main module entry point.

This allows running the gateway as: python -m artemis.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "artemis.main.app:app",
        host=settings.gateway.host,
        port=settings.gateway.port,
        reload=settings.gateway.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
