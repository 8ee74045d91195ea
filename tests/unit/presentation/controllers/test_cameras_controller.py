from __future__ import annotations

import pytest
from fastapi import HTTPException

from artemis.application.dtos.camera_dto import CamerasResponseDTO
from artemis.application.use_cases.camera_use_cases import (
    GetCameraStreamUseCase,
    ListCamerasUseCase,
)
from artemis.domain.entities.errors import NotFoundError, UpstreamError
from artemis.presentation.controllers.cameras_controller import (
    get_camera_stream,
    list_cameras,
)


class _FailingList(ListCamerasUseCase):
    def __init__(self) -> None:
        pass

    async def execute(self) -> CamerasResponseDTO:
        raise UpstreamError(401, "API key required", "wyze_bridge")


class _MissingCamera(GetCameraStreamUseCase):
    def __init__(self) -> None:
        pass

    async def execute(self, name_uri: str):
        raise NotFoundError(f"Camera '{name_uri}' not found")


@pytest.mark.asyncio
async def test_list_cameras_maps_client_fault() -> None:
    with pytest.raises(HTTPException) as exc:
        await list_cameras(list_cameras_use_case=_FailingList())
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_unknown_camera_is_not_found() -> None:
    with pytest.raises(HTTPException) as exc:
        await get_camera_stream(name="attic", stream_use_case=_MissingCamera())
    assert exc.value.status_code == 404
    assert exc.value.detail["message"] == "Camera 'attic' not found"
