"""System endpoints exposing health and info."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request

from artemis.application.dtos.health_dto import ApplicationInfoDTO, HealthStatusDTO
from artemis.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from artemis.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthStatusDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> HealthStatusDTO:
    """Liveness check; always healthy while the process serves requests."""
    return await get_health_status_use_case.execute()


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Return version, uptime and a fresh probe of the local upstreams."""
    started_at = getattr(request.app.state, "started_at", None)
    info_response = await get_application_info_use_case.execute(started_at)
    logger.debug("info.retrieved", status=info_response.status.value)
    return info_response
