"""Normalization of cloud light API payloads."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from artemis.domain.entities.light import ColorValue, LightDevice, LightState

from .extractors import (
    Extractor,
    as_mapping,
    first_match,
    first_match_in,
    flags,
    integer,
    mappings,
    text_list,
    texts,
)

# Candidate keys per field, most preferred first.
DEVICE_ID_FIELDS = texts("device", "deviceId", "id")
DEVICE_NAME_FIELDS = texts("deviceName", "name")
DEVICE_MODEL_FIELDS = texts("model", "sku")
CAPABILITY_FIELDS = [text_list("supportCmds"), text_list("capabilities")]
CONTROLLABLE_FIELDS = flags("controllable")
RETRIEVABLE_FIELDS = flags("retrievable")

ONLINE_FIELDS = flags("online")
BRIGHTNESS_FIELDS = [integer("brightness")]
COLOR_CHANNEL_FIELDS = {channel: [integer(channel)] for channel in ("r", "g", "b")}


def _online_power(prop: Mapping[str, Any]) -> Optional[bool]:
    value = prop.get("online")
    return value if isinstance(value, bool) else None


def _power_state(prop: Mapping[str, Any]) -> Optional[bool]:
    value = prop.get("powerState")
    return value == "on" if isinstance(value, str) else None


# Tried in this order inside every property map; the first match decides.
POWER_EXTRACTORS: List[Extractor[bool]] = [_online_power, _power_state]


def _color(prop: Mapping[str, Any]) -> Optional[ColorValue]:
    color = as_mapping(prop.get("color"))
    channels = {
        channel: first_match(color, extractors)
        for channel, extractors in COLOR_CHANNEL_FIELDS.items()
    }
    if any(value is None for value in channels.values()):
        return None
    return ColorValue(**channels)


def generated_device_id(account_index: int, position: int) -> str:
    return f"account{account_index}-device{position}"


def extract_device_payloads(body: Any) -> List[Mapping[str, Any]]:
    """Pull the device list out of ``{"data": {"devices": [...]}}``."""
    return mappings(as_mapping(as_mapping(body).get("data")).get("devices"))


def normalize_light_device(
    payload: Mapping[str, Any], account_index: int = 0, position: int = 0
) -> LightDevice:
    device_id = first_match(payload, DEVICE_ID_FIELDS) or generated_device_id(
        account_index, position
    )
    return LightDevice(
        device_id=device_id,
        name=first_match(payload, DEVICE_NAME_FIELDS, default=device_id),
        model=first_match(payload, DEVICE_MODEL_FIELDS, default=""),
        capabilities=first_match(payload, CAPABILITY_FIELDS, default=[]),
        controllable=first_match(payload, CONTROLLABLE_FIELDS, default=True),
        retrievable=first_match(payload, RETRIEVABLE_FIELDS, default=True),
        account_index=account_index,
    )


def normalize_light_devices(body: Any, account_index: int = 0) -> List[LightDevice]:
    return [
        normalize_light_device(payload, account_index, position)
        for position, payload in enumerate(extract_device_payloads(body))
    ]


def extract_power(properties: Iterable[Mapping[str, Any]]) -> bool:
    """Decide on/off from the state property maps.

    Unknown or missing power information is reported as off.
    """
    return first_match_in(properties, POWER_EXTRACTORS, default=False)


def normalize_light_state(device_id: str, model: str, body: Any) -> LightState:
    data = as_mapping(as_mapping(body).get("data"))
    properties = mappings(data.get("properties"))

    return LightState(
        device_id=first_match(data, DEVICE_ID_FIELDS, default=device_id),
        model=first_match(data, DEVICE_MODEL_FIELDS, default=model),
        is_on=extract_power(properties),
        online=first_match_in(properties, ONLINE_FIELDS),
        brightness=first_match_in(properties, BRIGHTNESS_FIELDS),
        color=first_match_in(properties, [_color]),
    )
