"""
Light Use Cases - Application Layer

Command routing and multi-account aggregation for the cloud light API. Each
configured API key is one account, addressed by its position in the
configured list.
"""

import asyncio
from dataclasses import replace
from typing import List, Sequence

from artemis.application.dtos.light_dto import (
    LightControlRequestDTO,
    LightControlResponseDTO,
    LightDeviceDTO,
    LightDevicesResponseDTO,
    LightStateResponseDTO,
)
from artemis.domain.entities.errors import InvalidSelectorError
from artemis.domain.entities.light import (
    BrightnessCommand,
    ColorCommand,
    LightCommand,
    LightDevice,
    PowerCommand,
)
from artemis.domain.gateways.light_gateway import ILightGateway
from artemis.domain.services.light_commands import parse_light_command
from artemis.shared import get_logger

logger = get_logger(__name__)


def select_account(gateways: Sequence[ILightGateway], index: int) -> ILightGateway:
    """Return the gateway for ``index`` or raise InvalidSelectorError."""
    if not 0 <= index < len(gateways):
        raise InvalidSelectorError(index, len(gateways))
    return gateways[index]


class ListLightDevicesUseCase:
    """Fan device listing out over every account and merge the results."""

    def __init__(self, light_gateways: Sequence[ILightGateway]):
        self._gateways = list(light_gateways)

    async def execute(self) -> LightDevicesResponseDTO:
        """
        List devices from all accounts concurrently.

        Devices keep their upstream order within an account and accounts keep
        their configured order. An account that fails is logged and left out;
        it never fails the whole request.
        """
        logger.info("lights.devices.fetch_started", accounts=len(self._gateways))

        results = await asyncio.gather(
            *(gateway.list_devices() for gateway in self._gateways),
            return_exceptions=True,
        )

        devices: List[LightDevice] = []
        for account_index, result in enumerate(results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error(
                    "lights.account.failed",
                    account_index=account_index,
                    error=str(result),
                    error_type=type(result).__name__,
                )
                continue

            logger.info(
                "lights.account.listed",
                account_index=account_index,
                count=len(result),
            )
            devices.extend(
                replace(device, account_index=account_index) for device in result
            )

        logger.info("lights.devices.fetch_completed", count=len(devices))
        return LightDevicesResponseDTO(
            message=f"Found {len(devices)} device(s)",
            count=len(devices),
            devices=[LightDeviceDTO.from_domain(device) for device in devices],
        )


class ControlLightUseCase:
    """Validate a control request and dispatch it to the owning account."""

    def __init__(self, light_gateways: Sequence[ILightGateway]):
        self._gateways = list(light_gateways)

    async def execute(self, request: LightControlRequestDTO) -> LightControlResponseDTO:
        """
        Route one control request.

        Raises:
            InvalidSelectorError: If ``api_key_index`` is not a configured account
            UnsupportedCommandError: If the command name is unknown
            InvalidValueError: If the value does not fit the command
            OutOfRangeError: If a brightness or color value is out of bounds
            GatewayError: If the upstream call fails
        """
        gateway = select_account(self._gateways, request.api_key_index)
        command = parse_light_command(request.command, request.value)

        logger.info(
            "lights.control.dispatch",
            device_id=request.device_id,
            command=command.name.value,
            account_index=request.api_key_index,
        )
        await self._dispatch(gateway, request.device_id, request.model, command)

        return LightControlResponseDTO(
            message="Device controlled successfully",
            device_id=request.device_id,
            command=command.name.value,
        )

    @staticmethod
    async def _dispatch(
        gateway: ILightGateway, device_id: str, model: str, command: LightCommand
    ) -> None:
        if isinstance(command, PowerCommand):
            await gateway.set_power(device_id, model, command.on)
        elif isinstance(command, BrightnessCommand):
            await gateway.set_brightness(device_id, model, command.level)
        elif isinstance(command, ColorCommand):
            color = command.color
            await gateway.set_color(device_id, model, color.r, color.g, color.b)
        else:  # pragma: no cover - the parser only builds the three variants
            raise TypeError(f"Unhandled light command: {command!r}")


class GetLightStateUseCase:
    """Query the current state of one light."""

    def __init__(self, light_gateways: Sequence[ILightGateway]):
        self._gateways = list(light_gateways)

    async def execute(
        self, device_id: str, model: str, api_key_index: int = 0
    ) -> LightStateResponseDTO:
        gateway = select_account(self._gateways, api_key_index)
        state = await gateway.get_state(device_id, model)
        power = "on" if state.is_on else "off"
        return LightStateResponseDTO.from_domain(state, message=f"Device is {power}")
