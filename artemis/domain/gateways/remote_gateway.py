"""
Remote Control Gateway Interface - Domain Layer

Contract for the local TV remote microservice that owns discovery, pairing
sessions and the remote protocol itself.
"""

from abc import ABC, abstractmethod
from typing import Optional

from artemis.domain.entities.remote import (
    DiscoveryResult,
    PairResult,
    RemoteCommandResult,
)


class IRemoteControlGateway(ABC):
    """Interface for the TV remote service."""

    @abstractmethod
    async def discover(self) -> DiscoveryResult:
        """Run a bounded network scan for remote-capable devices."""
        pass

    @abstractmethod
    async def pair(self, host: str, pin: Optional[str] = None) -> PairResult:
        """
        Run one phase of the pairing handshake.

        Args:
            host: Address of the device to pair with
            pin: PIN shown on the TV; absent for phase 1

        Returns:
            PairResult: Outcome, including which phase was executed
        """
        pass

    @abstractmethod
    async def send_command(
        self,
        host: str,
        command: str,
        text: Optional[str] = None,
        app_package: Optional[str] = None,
    ) -> RemoteCommandResult:
        """Send a key, text input or app launch command to a paired device."""
        pass

    @abstractmethod
    async def health_check(self) -> None:
        """Raise a GatewayError when the service is not healthy."""
        pass
