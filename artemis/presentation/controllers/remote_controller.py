"""
Remote Router - Presentation Layer

FastAPI router for TV remote discovery, pairing and commands.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from artemis.application.dtos.remote_dto import (
    PairRequestDTO,
    PairResponseDTO,
    RemoteCommandRequestDTO,
    RemoteCommandResponseDTO,
    RemoteDiscoveryResponseDTO,
)
from artemis.application.use_cases.remote_use_cases import (
    DiscoverRemoteDevicesUseCase,
    PairRemoteDeviceUseCase,
    SendRemoteCommandUseCase,
)
from artemis.domain.entities.errors import DomainError
from artemis.presentation.errors import to_http_exception
from artemis.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/firetv", tags=["Remote"])


@router.get("/discover", response_model=RemoteDiscoveryResponseDTO)
@inject
async def discover_devices(
    discover_use_case: DiscoverRemoteDevicesUseCase = Depends(
        Provide["discover_remote_devices_use_case"]
    ),
) -> RemoteDiscoveryResponseDTO:
    """Scan the local network for remote-capable TVs (takes a few seconds)."""
    try:
        return await discover_use_case.execute()
    except DomainError as e:
        logger.warning("firetv.discover.failed", error=e.message)
        raise to_http_exception(e) from e


@router.post("/pair", response_model=PairResponseDTO)
@inject
async def pair_device(
    request: PairRequestDTO,
    pair_use_case: PairRemoteDeviceUseCase = Depends(
        Provide["pair_remote_device_use_case"]
    ),
) -> PairResponseDTO:
    """
    Run one step of the PIN pairing handshake.

    Send ``{host}`` to make the TV display a PIN, then ``{host, pin}`` to
    complete pairing.
    """
    try:
        return await pair_use_case.execute(request)
    except DomainError as e:
        logger.warning("firetv.pair.failed", host=request.host, error=e.message)
        raise to_http_exception(e) from e


@router.post("/command", response_model=RemoteCommandResponseDTO)
@inject
async def send_command(
    request: RemoteCommandRequestDTO,
    command_use_case: SendRemoteCommandUseCase = Depends(
        Provide["send_remote_command_use_case"]
    ),
) -> RemoteCommandResponseDTO:
    """Send a key press, text input or app launch to a paired TV."""
    try:
        return await command_use_case.execute(request)
    except DomainError as e:
        logger.warning(
            "firetv.command.failed",
            host=request.host,
            command=request.command,
            error=e.message,
        )
        raise to_http_exception(e) from e
