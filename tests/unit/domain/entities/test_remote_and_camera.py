from __future__ import annotations

import pytest

from artemis.domain.entities.camera import CameraStatus
from artemis.domain.entities.remote import PairingPhase


@pytest.mark.parametrize("pin", [None, "", "   "])
def test_missing_pin_selects_phase_one(pin) -> None:
    assert PairingPhase.for_pin(pin) is PairingPhase.AWAITING_PIN


def test_present_pin_selects_phase_two() -> None:
    assert PairingPhase.for_pin("123456") is PairingPhase.VERIFYING


@pytest.mark.parametrize(
    "connected, enabled, expected",
    [
        (True, True, CameraStatus.ONLINE),
        (True, False, CameraStatus.OFFLINE),
        (False, True, CameraStatus.OFFLINE),
        (False, False, CameraStatus.OFFLINE),
    ],
)
def test_camera_status_requires_connected_and_enabled(
    connected: bool, enabled: bool, expected: CameraStatus
) -> None:
    assert CameraStatus.from_flags(connected, enabled) is expected


def test_camera_entry_primary_stream_is_hls(sample_camera) -> None:
    assert sample_camera.status is CameraStatus.ONLINE
    assert sample_camera.stream_url == sample_camera.streams.hls
    assert sample_camera.stream_url.endswith("/front-door/stream.m3u8")
