"""Domain entities for the TV remote (discovery, pairing, commands)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_REMOTE_PORT = 6466

TEXT_INPUT_COMMAND = "text_input"
LAUNCH_APP_COMMAND = "launch_app"


class PairingPhase(str, Enum):
    """The two steps of the PIN handshake.

    The gateway keeps no session between the steps; the phase is chosen from
    the request alone.
    """

    AWAITING_PIN = "awaiting_pin"
    VERIFYING = "verifying"

    @classmethod
    def for_pin(cls, pin: Optional[str]) -> "PairingPhase":
        """Phase 1 when no PIN was supplied, phase 2 otherwise.

        A PIN made only of whitespace counts as absent, so it restarts the
        handshake instead of sending an empty PIN for verification.
        """
        if pin is None or not pin.strip():
            return cls.AWAITING_PIN
        return cls.VERIFYING


@dataclass(frozen=True, slots=True)
class DiscoveredRemoteDevice:
    name: str
    host: str
    port: int = DEFAULT_REMOTE_PORT
    model: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DiscoveryResult:
    devices: List[DiscoveredRemoteDevice] = field(default_factory=list)
    message: str = ""


@dataclass(frozen=True, slots=True)
class PairResult:
    success: bool
    message: str
    phase: PairingPhase
    awaiting_pin: bool = False
    device_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RemoteCommandResult:
    success: bool
    message: str
    command: str
