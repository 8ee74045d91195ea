"""
Lights Router - Presentation Layer

This module defines the FastAPI router for the cloud light endpoints.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query

from artemis.application.dtos.light_dto import (
    LightControlRequestDTO,
    LightControlResponseDTO,
    LightDevicesResponseDTO,
    LightStateResponseDTO,
)
from artemis.application.use_cases.light_use_cases import (
    ControlLightUseCase,
    GetLightStateUseCase,
    ListLightDevicesUseCase,
)
from artemis.domain.entities.errors import DomainError
from artemis.presentation.errors import to_http_exception
from artemis.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/govee/devices", tags=["Lights"])


@router.get("", response_model=LightDevicesResponseDTO)
@inject
async def list_devices(
    list_devices_use_case: ListLightDevicesUseCase = Depends(
        Provide["list_light_devices_use_case"]
    ),
) -> LightDevicesResponseDTO:
    """
    List the lights of every configured account.

    Accounts that fail are skipped, so this only fails on unexpected errors.
    """
    response = await list_devices_use_case.execute()
    logger.info("lights.devices.retrieved", device_count=response.count)
    return response


@router.post("/control", response_model=LightControlResponseDTO)
@inject
async def control_device(
    request: LightControlRequestDTO,
    control_use_case: ControlLightUseCase = Depends(Provide["control_light_use_case"]),
) -> LightControlResponseDTO:
    """
    Send a turn, brightness or color command to one light.

    Args:
        request: Target device, command and value
        control_use_case: Injected command router

    Returns:
        LightControlResponseDTO: Confirmation with the executed command

    Raises:
        HTTPException: 400 for invalid input, 5xx for upstream failures
    """
    logger.info(
        "lights.control.requested",
        device_id=request.device_id,
        command=request.command,
        account_index=request.api_key_index,
    )
    try:
        return await control_use_case.execute(request)
    except DomainError as e:
        logger.warning(
            "lights.control.failed",
            device_id=request.device_id,
            command=request.command,
            error=e.message,
            error_type=type(e).__name__,
        )
        raise to_http_exception(e) from e


@router.get("/state", response_model=LightStateResponseDTO)
@inject
async def get_device_state(
    device_id: str = Query(
        alias="deviceId", min_length=1, description="Device identifier"
    ),
    model: str = Query(min_length=1, description="Device model"),
    api_key_index: int = Query(
        default=0, alias="apiKeyIndex", description="Account that owns the device"
    ),
    get_state_use_case: GetLightStateUseCase = Depends(
        Provide["get_light_state_use_case"]
    ),
) -> LightStateResponseDTO:
    """Return the current power state of one light."""
    try:
        return await get_state_use_case.execute(device_id, model, api_key_index)
    except DomainError as e:
        logger.warning(
            "lights.state.failed",
            device_id=device_id,
            error=e.message,
            error_type=type(e).__name__,
        )
        raise to_http_exception(e) from e
