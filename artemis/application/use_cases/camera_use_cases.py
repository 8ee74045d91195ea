"""Use cases for the camera list and stream lookup."""

from artemis.application.dtos.camera_dto import (
    CameraDTO,
    CamerasResponseDTO,
    CameraStreamResponseDTO,
)
from artemis.domain.entities.camera import CameraStatus
from artemis.domain.entities.errors import InvalidInputError
from artemis.domain.gateways.camera_gateway import ICameraBridgeGateway
from artemis.shared import get_logger

logger = get_logger(__name__)

NO_CAMERAS_MESSAGE = (
    "No cameras found. Make sure the camera bridge is running and cameras "
    "are connected."
)
ONLINE_MESSAGE = "Camera is online and streaming"
OFFLINE_MESSAGE = "Camera is offline - stream may not be available"


def camera_count_message(count: int) -> str:
    if count == 0:
        return NO_CAMERAS_MESSAGE
    if count == 1:
        return "Found 1 camera"
    return f"Found {count} cameras"


class ListCamerasUseCase:
    def __init__(self, camera_gateway: ICameraBridgeGateway):
        self._camera_gateway = camera_gateway

    async def execute(self) -> CamerasResponseDTO:
        cameras = await self._camera_gateway.list_cameras()
        return CamerasResponseDTO(
            message=camera_count_message(len(cameras)),
            count=len(cameras),
            cameras=[CameraDTO.from_domain(camera) for camera in cameras],
        )


class GetCameraStreamUseCase:
    """Resolve the stream endpoints of one camera.

    Offline cameras still get their URLs; only the message changes.
    """

    def __init__(self, camera_gateway: ICameraBridgeGateway):
        self._camera_gateway = camera_gateway

    async def execute(self, name_uri: str) -> CameraStreamResponseDTO:
        if not name_uri or not name_uri.strip():
            raise InvalidInputError("Missing required 'name' query parameter")

        camera = await self._camera_gateway.get_camera(name_uri.strip())
        if camera.status is CameraStatus.ONLINE:
            message = ONLINE_MESSAGE
        else:
            message = OFFLINE_MESSAGE
            logger.warning("cameras.stream.offline", name_uri=camera.name_uri)

        return CameraStreamResponseDTO.from_domain(camera, message=message)
