from __future__ import annotations

from artemis.domain.entities.light import ColorValue
from artemis.infrastructure.normalizers.govee import (
    extract_power,
    normalize_light_devices,
    normalize_light_state,
)


def test_normalize_devices_maps_native_fields() -> None:
    body = {
        "code": 200,
        "message": "Success",
        "data": {
            "devices": [
                {
                    "device": "AA:BB",
                    "model": "H6159",
                    "deviceName": "Desk Lamp",
                    "controllable": True,
                    "retrievable": False,
                    "supportCmds": ["turn", "brightness", 7, "color"],
                }
            ]
        },
    }

    (device,) = normalize_light_devices(body, account_index=1)

    assert device.device_id == "AA:BB"
    assert device.name == "Desk Lamp"
    assert device.model == "H6159"
    assert device.capabilities == ["turn", "brightness", "color"]
    assert device.retrievable is False
    assert device.device_type == "light"
    assert device.account_index == 1


def test_normalize_devices_falls_back_through_candidate_keys() -> None:
    body = {
        "data": {
            "devices": [
                {"deviceId": "CC:DD", "name": "Strip", "sku": "H6199"},
                {"id": "EE:FF", "capabilities": ["turn"]},
            ]
        }
    }

    first, second = normalize_light_devices(body)

    assert (first.device_id, first.name, first.model) == ("CC:DD", "Strip", "H6199")
    assert second.name == "EE:FF"
    assert second.model == ""
    assert second.capabilities == ["turn"]


def test_missing_device_id_is_generated_from_context() -> None:
    body = {"data": {"devices": [{"model": "H1"}, {"device": "  ", "model": "H2"}]}}

    devices = normalize_light_devices(body, account_index=2)

    assert [d.device_id for d in devices] == ["account2-device0", "account2-device1"]


def test_malformed_device_list_yields_nothing() -> None:
    assert normalize_light_devices({"data": {"devices": None}}) == []
    assert normalize_light_devices({"data": "oops"}) == []
    assert normalize_light_devices(["not", "an", "object"]) == []


def test_power_first_matching_property_decides() -> None:
    assert extract_power([{"online": True}, {"powerState": "off"}]) is True
    assert extract_power([{"powerState": "on"}, {"online": False}]) is True
    assert extract_power([{"online": "yes", "powerState": "on"}]) is True


def test_power_state_comparison_is_case_sensitive() -> None:
    assert extract_power([{"powerState": "ON"}]) is False


def test_unknown_power_defaults_to_off() -> None:
    assert extract_power([]) is False
    assert extract_power([{"brightness": 40}]) is False


def test_normalize_state_reads_optional_properties() -> None:
    body = {
        "data": {
            "device": "AA:BB",
            "model": "H6159",
            "properties": [
                {"online": True},
                {"powerState": "on"},
                {"brightness": 64},
                {"color": {"r": 10, "g": 20, "b": 30}},
            ],
        }
    }

    state = normalize_light_state("AA:BB", "H6159", body)

    assert state.is_on is True
    assert state.online is True
    assert state.brightness == 64
    assert state.color == ColorValue(r=10, g=20, b=30)


def test_normalize_state_keeps_request_identity_when_missing() -> None:
    state = normalize_light_state("AA:BB", "H6159", {"data": {"properties": []}})

    assert state.device_id == "AA:BB"
    assert state.model == "H6159"
    assert state.is_on is False
    assert state.brightness is None
    assert state.color is None
