"""Use cases for TV remote discovery, pairing and commands."""

from artemis.application.dtos.remote_dto import (
    PairRequestDTO,
    PairResponseDTO,
    RemoteCommandRequestDTO,
    RemoteCommandResponseDTO,
    RemoteDiscoveryResponseDTO,
)
from artemis.domain.entities.errors import InvalidInputError
from artemis.domain.entities.remote import LAUNCH_APP_COMMAND, TEXT_INPUT_COMMAND
from artemis.domain.gateways.remote_gateway import IRemoteControlGateway
from artemis.shared import get_logger

logger = get_logger(__name__)

# Commands that cannot be sent without an extra request field.
REQUIRED_COMMAND_FIELDS = {
    TEXT_INPUT_COMMAND: "text",
    LAUNCH_APP_COMMAND: "app_package",
}


class DiscoverRemoteDevicesUseCase:
    def __init__(self, remote_gateway: IRemoteControlGateway):
        self._remote_gateway = remote_gateway

    async def execute(self) -> RemoteDiscoveryResponseDTO:
        result = await self._remote_gateway.discover()
        return RemoteDiscoveryResponseDTO.from_domain(result)


class PairRemoteDeviceUseCase:
    """Forward one phase of the pairing handshake; holds no session."""

    def __init__(self, remote_gateway: IRemoteControlGateway):
        self._remote_gateway = remote_gateway

    async def execute(self, request: PairRequestDTO) -> PairResponseDTO:
        result = await self._remote_gateway.pair(request.host, request.pin)
        return PairResponseDTO.from_domain(result)


class SendRemoteCommandUseCase:
    def __init__(self, remote_gateway: IRemoteControlGateway):
        self._remote_gateway = remote_gateway

    async def execute(self, request: RemoteCommandRequestDTO) -> RemoteCommandResponseDTO:
        """
        Send a command to a paired device.

        Raises:
            InvalidInputError: If text_input has no text or launch_app has no
                app package
        """
        required = REQUIRED_COMMAND_FIELDS.get(request.command)
        if required is not None and not getattr(request, required):
            raise InvalidInputError(
                f"'{required}' is required for the '{request.command}' command",
                {"command": request.command, "field": required},
            )

        result = await self._remote_gateway.send_command(
            request.host,
            request.command,
            text=request.text,
            app_package=request.app_package,
        )
        logger.info(
            "firetv.command.completed",
            host=request.host,
            command=result.command,
            success=result.success,
        )
        return RemoteCommandResponseDTO.from_domain(result)
