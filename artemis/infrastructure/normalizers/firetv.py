"""Normalization of TV remote service payloads."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from artemis.domain.entities.remote import (
    DEFAULT_REMOTE_PORT,
    DiscoveredRemoteDevice,
    DiscoveryResult,
    PairingPhase,
    PairResult,
    RemoteCommandResult,
)
from artemis.shared import get_logger

from .extractors import as_mapping, first_match, flags, integer, mappings, texts

logger = get_logger(__name__)

HOST_FIELDS = texts("host", "address", "ip")
NAME_FIELDS = texts("name", "device_name")
PORT_FIELDS = [integer("port")]
MODEL_FIELDS = texts("model", "model_name")

SUCCESS_FIELDS = flags("success")
AWAITING_PIN_FIELDS = flags("awaiting_pin", "awaitingPin")
PAIRED_NAME_FIELDS = texts("device_name", "deviceName", "name")
MESSAGE_FIELDS = texts("message", "detail")
COMMAND_FIELDS = texts("command")

_PHASE_MESSAGES = {
    PairingPhase.AWAITING_PIN: "Enter the PIN displayed on the TV",
    PairingPhase.VERIFYING: "Pairing complete",
}


def normalize_discovered_device(
    payload: Mapping[str, Any],
) -> Optional[DiscoveredRemoteDevice]:
    """Map one scan entry; entries without an address cannot be used."""
    host = first_match(payload, HOST_FIELDS)
    if host is None:
        logger.warning("firetv.discover.entry_without_host", entry=dict(payload))
        return None
    return DiscoveredRemoteDevice(
        name=first_match(payload, NAME_FIELDS, default=f"Fire TV ({host})"),
        host=host,
        port=first_match(payload, PORT_FIELDS, default=DEFAULT_REMOTE_PORT),
        model=first_match(payload, MODEL_FIELDS),
    )


def normalize_discovery(body: Any) -> DiscoveryResult:
    payload = as_mapping(body)
    devices: List[DiscoveredRemoteDevice] = []
    for entry in mappings(payload.get("devices")):
        device = normalize_discovered_device(entry)
        if device is not None:
            devices.append(device)

    default_message = f"Found {len(devices)} device(s)"
    return DiscoveryResult(
        devices=devices,
        message=first_match(payload, MESSAGE_FIELDS, default=default_message),
    )


def normalize_pair_result(body: Any, phase: PairingPhase) -> PairResult:
    payload = as_mapping(body)
    success = first_match(payload, SUCCESS_FIELDS, default=True)
    awaiting_default = success and phase is PairingPhase.AWAITING_PIN
    return PairResult(
        success=success,
        message=first_match(payload, MESSAGE_FIELDS, default=_PHASE_MESSAGES[phase]),
        phase=phase,
        awaiting_pin=first_match(payload, AWAITING_PIN_FIELDS, default=awaiting_default),
        device_name=first_match(payload, PAIRED_NAME_FIELDS),
    )


def normalize_command_result(body: Any, command: str) -> RemoteCommandResult:
    payload = as_mapping(body)
    return RemoteCommandResult(
        success=first_match(payload, SUCCESS_FIELDS, default=True),
        message=first_match(
            payload, MESSAGE_FIELDS, default=f"Sent command: {command}"
        ),
        command=first_match(payload, COMMAND_FIELDS, default=command),
    )
