"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from artemis.application.models import SystemInfo
from artemis.application.use_cases.camera_use_cases import (
    GetCameraStreamUseCase,
    ListCamerasUseCase,
)
from artemis.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from artemis.application.use_cases.light_use_cases import (
    ControlLightUseCase,
    GetLightStateUseCase,
    ListLightDevicesUseCase,
)
from artemis.application.use_cases.remote_use_cases import (
    DiscoverRemoteDevicesUseCase,
    PairRemoteDeviceUseCase,
    SendRemoteCommandUseCase,
)
from artemis.domain.entities.errors import GatewayError
from artemis.infrastructure.gateways.firetv_gateway import FireTVRemoteGateway
from artemis.infrastructure.gateways.govee_gateway import build_light_gateways
from artemis.infrastructure.gateways.wyze_bridge_gateway import WyzeBridgeGateway
from artemis.infrastructure.normalizers.wyze import StreamPorts
from artemis.infrastructure.services.health_check_service import HealthCheckService
from artemis.shared import get_logger

from .config import AppSettings, collect_api_keys

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    light_api_keys = providers.Callable(
        collect_api_keys,
        config.govee.api_key,
        config.govee.api_key_secondary,
    )

    # Gateways
    light_gateways = providers.Singleton(
        build_light_gateways,
        api_keys=light_api_keys,
        base_url=config.govee.base_url,
        timeout=config.govee.timeout,
    )

    remote_gateway = providers.Singleton(
        FireTVRemoteGateway,
        service_url=config.firetv.service_url,
        timeout=config.firetv.timeout,
    )

    camera_gateway = providers.Singleton(
        WyzeBridgeGateway,
        bridge_url=config.wyze.bridge_url,
        api_key=config.wyze.bridge_api_key,
        timeout=config.wyze.timeout,
        stream_ports=providers.Factory(
            StreamPorts,
            hls=config.wyze.hls_port,
            rtsp=config.wyze.rtsp_port,
            webrtc=config.wyze.webrtc_port,
        ),
    )

    # Application (use cases)
    list_light_devices_use_case = providers.Factory(
        ListLightDevicesUseCase,
        light_gateways=light_gateways,
    )

    control_light_use_case = providers.Factory(
        ControlLightUseCase,
        light_gateways=light_gateways,
    )

    get_light_state_use_case = providers.Factory(
        GetLightStateUseCase,
        light_gateways=light_gateways,
    )

    discover_remote_devices_use_case = providers.Factory(
        DiscoverRemoteDevicesUseCase,
        remote_gateway=remote_gateway,
    )

    pair_remote_device_use_case = providers.Factory(
        PairRemoteDeviceUseCase,
        remote_gateway=remote_gateway,
    )

    send_remote_command_use_case = providers.Factory(
        SendRemoteCommandUseCase,
        remote_gateway=remote_gateway,
    )

    list_cameras_use_case = providers.Factory(
        ListCamerasUseCase,
        camera_gateway=camera_gateway,
    )

    get_camera_stream_use_case = providers.Factory(
        GetCameraStreamUseCase,
        camera_gateway=camera_gateway,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        remote_gateway=remote_gateway,
        camera_gateway=camera_gateway,
        light_account_count=providers.Callable(len, light_api_keys),
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.gateway.title,
        version=config.gateway.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.gateway.git_commit,
        light_accounts=providers.Callable(len, light_api_keys),
        firetv_service_url=config.firetv.service_url,
        wyze_bridge_url=config.wyze.bridge_url,
    )

    get_health_status_use_case = providers.Factory(GetHealthStatusUseCase)

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


async def _probe_upstreams(container: AppContainer) -> None:
    """Check the local upstreams once; failures are logged, never fatal."""
    probes = {
        "firetv": container.remote_gateway(),
        "wyze_bridge": container.camera_gateway(),
    }
    for name, gateway in probes.items():
        try:
            await gateway.health_check()
            logger.info("container.upstream.reachable", upstream=name)
        except GatewayError as exc:
            logger.warning(
                "container.upstream.unavailable",
                upstream=name,
                error=exc.message,
            )


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The gateways open one HTTP client per call, so there is nothing to
    connect or close; startup only reports what is configured and reachable.
    """
    container = get_container()

    light_gateways = container.light_gateways()
    if not light_gateways:
        logger.warning(
            "container.lights.no_api_keys",
            hint="Set GOVEE_API_KEY (and optionally GOVEE_API_KEY_SECONDARY)",
        )
    else:
        logger.info("container.lights.accounts", count=len(light_gateways))

    await _probe_upstreams(container)

    logger.info("container.resources.initialized")
    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
