"""TV remote microservice gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, Optional

from artemis.domain.entities.remote import (
    DiscoveryResult,
    PairingPhase,
    PairResult,
    RemoteCommandResult,
)
from artemis.domain.gateways.remote_gateway import IRemoteControlGateway
from artemis.infrastructure.normalizers.firetv import (
    normalize_command_result,
    normalize_discovery,
    normalize_pair_result,
)
from artemis.shared import get_logger, mask_secret
from artemis.shared.consts import EnumUpstream

from .base import HTTPGateway

logger = get_logger(__name__)

FIRETV_SERVICE_URL = "http://localhost:9090"
DISCOVER_ENDPOINT = "/discover"
PAIR_ENDPOINT = "/pair"
COMMAND_ENDPOINT = "/command"
HEALTH_ENDPOINT = "/health"


class FireTVRemoteGateway(HTTPGateway, IRemoteControlGateway):
    """
    HTTP client for the remote-protocol microservice.

    The microservice owns the pairing sessions; this gateway only forwards
    each handshake phase and never keeps state between calls.
    """

    upstream = EnumUpstream.FIRETV.value

    def __init__(self, service_url: str = FIRETV_SERVICE_URL, timeout: float = 15.0):
        super().__init__(service_url, timeout)

    async def discover(self) -> DiscoveryResult:
        logger.info("firetv.discover.started", service_url=self.base_url)
        response = await self._request("GET", DISCOVER_ENDPOINT, event="firetv.discover")
        result = normalize_discovery(self._decode(response, event="firetv.discover"))
        logger.info("firetv.discover.completed", count=len(result.devices))
        return result

    async def pair(self, host: str, pin: Optional[str] = None) -> PairResult:
        phase = PairingPhase.for_pin(pin)
        if phase is PairingPhase.AWAITING_PIN:
            return await self._start_pairing(host)
        return await self._finish_pairing(host, pin.strip())

    async def _start_pairing(self, host: str) -> PairResult:
        logger.info("firetv.pair.started", host=host)
        response = await self._request(
            "POST", PAIR_ENDPOINT, event="firetv.pair", json={"host": host}
        )
        result = normalize_pair_result(
            self._decode(response, event="firetv.pair"), PairingPhase.AWAITING_PIN
        )
        logger.info("firetv.pair.awaiting_pin", host=host, success=result.success)
        return result

    async def _finish_pairing(self, host: str, pin: str) -> PairResult:
        logger.info("firetv.pair.verifying", host=host, pin=mask_secret(pin))
        response = await self._request(
            "POST", PAIR_ENDPOINT, event="firetv.pair", json={"host": host, "pin": pin}
        )
        result = normalize_pair_result(
            self._decode(response, event="firetv.pair"), PairingPhase.VERIFYING
        )
        logger.info(
            "firetv.pair.completed",
            host=host,
            success=result.success,
            device_name=result.device_name,
        )
        return result

    async def send_command(
        self,
        host: str,
        command: str,
        text: Optional[str] = None,
        app_package: Optional[str] = None,
    ) -> RemoteCommandResult:
        payload: Dict[str, Any] = {"host": host, "command": command}
        if text is not None:
            payload["text"] = text
        if app_package is not None:
            payload["app_package"] = app_package

        logger.info("firetv.command.request", host=host, command=command)
        response = await self._request(
            "POST", COMMAND_ENDPOINT, event="firetv.command", json=payload
        )
        return normalize_command_result(
            self._decode(response, event="firetv.command"), command
        )

    async def health_check(self) -> None:
        await self._request("GET", HEALTH_ENDPOINT, event="firetv.health")
