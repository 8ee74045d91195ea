"""Cameras Router - Presentation Layer."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query

from artemis.application.dtos.camera_dto import (
    CamerasResponseDTO,
    CameraStreamResponseDTO,
)
from artemis.application.use_cases.camera_use_cases import (
    GetCameraStreamUseCase,
    ListCamerasUseCase,
)
from artemis.domain.entities.errors import DomainError
from artemis.presentation.errors import to_http_exception
from artemis.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/cameras", tags=["Cameras"])


@router.get("", response_model=CamerasResponseDTO)
@inject
async def list_cameras(
    list_cameras_use_case: ListCamerasUseCase = Depends(
        Provide["list_cameras_use_case"]
    ),
) -> CamerasResponseDTO:
    """List the cameras known to the streaming bridge."""
    try:
        response = await list_cameras_use_case.execute()
    except DomainError as e:
        logger.warning("cameras.list.failed", error=e.message)
        raise to_http_exception(e) from e

    logger.info("cameras.retrieved", camera_count=response.count)
    return response


@router.get("/stream", response_model=CameraStreamResponseDTO)
@inject
async def get_camera_stream(
    name: str = Query(default="", description="URL-safe camera name"),
    stream_use_case: GetCameraStreamUseCase = Depends(
        Provide["get_camera_stream_use_case"]
    ),
) -> CameraStreamResponseDTO:
    """Return HLS, RTSP and WebRTC URLs for one camera."""
    try:
        return await stream_use_case.execute(name)
    except DomainError as e:
        logger.warning("cameras.stream.failed", name_uri=name, error=e.message)
        raise to_http_exception(e) from e
