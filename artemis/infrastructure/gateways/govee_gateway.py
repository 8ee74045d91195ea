"""Cloud light API gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from artemis.domain.entities.errors import UpstreamError
from artemis.domain.entities.light import LightCommandName, LightDevice, LightState
from artemis.domain.gateways.light_gateway import ILightGateway
from artemis.domain.services.light_commands import ensure_brightness, ensure_color
from artemis.infrastructure.normalizers.extractors import as_mapping, first_match
from artemis.infrastructure.normalizers.govee import (
    normalize_light_devices,
    normalize_light_state,
)
from artemis.shared import get_logger
from artemis.shared.consts import EnumUpstream

from .base import ERROR_MESSAGE_FIELDS, HTTPGateway

logger = get_logger(__name__)

GOVEE_BASE_URL = "https://developer-api.govee.com"
DEVICES_ENDPOINT = "/v1/devices"
CONTROL_ENDPOINT = "/v1/devices/control"
STATE_ENDPOINT = "/v1/devices/state"

API_KEY_HEADER = "Govee-API-Key"
SUCCESS_CODE = 200


class GoveeLightGateway(HTTPGateway, ILightGateway):
    """HTTP client for one account of the Govee developer API."""

    upstream = EnumUpstream.GOVEE.value

    def __init__(
        self,
        api_key: str,
        base_url: str = GOVEE_BASE_URL,
        timeout: float = 10.0,
        account_index: int = 0,
    ):
        """
        Initialize the gateway for one account.

        Args:
            api_key: Developer API key of the account
            base_url: Base URL of the developer API
            timeout: Request timeout in seconds
            account_index: Position of the account in the configured key list
        """
        super().__init__(base_url, timeout)
        self._api_key = api_key
        self.account_index = account_index

    def _headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self._api_key, "Content-Type": "application/json"}

    async def list_devices(self) -> List[LightDevice]:
        response = await self._request(
            "GET", DEVICES_ENDPOINT, event="govee.devices", headers=self._headers()
        )
        devices = normalize_light_devices(
            self._decode(response, event="govee.devices"), self.account_index
        )
        logger.info("govee.devices.listed", count=len(devices))
        return devices

    async def set_power(self, device_id: str, model: str, on: bool) -> None:
        await self._control(device_id, model, LightCommandName.TURN, "on" if on else "off")

    async def set_brightness(self, device_id: str, model: str, level: int) -> None:
        await self._control(
            device_id, model, LightCommandName.BRIGHTNESS, ensure_brightness(level)
        )

    async def set_color(self, device_id: str, model: str, r: int, g: int, b: int) -> None:
        color = ensure_color(r, g, b)
        await self._control(
            device_id,
            model,
            LightCommandName.COLOR,
            {"r": color.r, "g": color.g, "b": color.b},
        )

    async def get_state(self, device_id: str, model: str) -> LightState:
        response = await self._request(
            "GET",
            STATE_ENDPOINT,
            event="govee.state",
            params={"device": device_id, "model": model},
            headers=self._headers(),
        )
        state = normalize_light_state(
            device_id, model, self._decode(response, event="govee.state")
        )
        logger.info("govee.state.retrieved", device_id=device_id, is_on=state.is_on)
        return state

    async def _control(
        self, device_id: str, model: str, command: LightCommandName, value: Any
    ) -> None:
        payload = {
            "device": device_id,
            "model": model,
            "cmd": {"name": command.value, "value": value},
        }
        logger.info(
            "govee.control.request",
            device_id=device_id,
            model=model,
            command=command.value,
            value=value,
        )
        response = await self._request(
            "PUT",
            CONTROL_ENDPOINT,
            event="govee.control",
            json=payload,
            headers=self._headers(),
        )

        # The API can answer HTTP 200 with an error code in the body.
        body = as_mapping(self._decode(response, event="govee.control"))
        code = body.get("code")
        if isinstance(code, int) and not isinstance(code, bool) and code != SUCCESS_CODE:
            message = first_match(body, ERROR_MESSAGE_FIELDS) or f"code {code}"
            logger.error(
                "govee.control.rejected",
                device_id=device_id,
                command=command.value,
                code=code,
                upstream_message=message,
            )
            raise UpstreamError(code, message, self.upstream)

        logger.info("govee.control.succeeded", device_id=device_id, command=command.value)


def build_light_gateways(
    api_keys: Sequence[str],
    base_url: str = GOVEE_BASE_URL,
    timeout: float = 10.0,
) -> List[ILightGateway]:
    """One gateway per configured API key, in configuration order."""
    return [
        GoveeLightGateway(
            api_key=key, base_url=base_url, timeout=timeout, account_index=index
        )
        for index, key in enumerate(api_keys)
    ]
