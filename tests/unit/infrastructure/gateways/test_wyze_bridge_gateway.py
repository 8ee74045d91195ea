from __future__ import annotations

import pytest

from artemis.domain.entities.camera import CameraStatus
from artemis.domain.entities.errors import NotFoundError, UpstreamError
from artemis.infrastructure.gateways.wyze_bridge_gateway import WyzeBridgeGateway
from artemis.infrastructure.normalizers.wyze import StreamPorts

BRIDGE_URL = "http://192.168.1.100:5050"


@pytest.mark.asyncio
async def test_list_cameras_builds_stream_urls_from_bridge_host(http_stub) -> None:
    http_stub.json(
        200,
        {
            "front-door": {
                "name_uri": "front-door",
                "nickname": "Front Door",
                "model_name": "Wyze Cam v3",
                "connected": True,
                "enabled": True,
            }
        },
    )
    gateway = WyzeBridgeGateway(BRIDGE_URL)

    (camera,) = await gateway.list_cameras()

    assert http_stub.last_call.url == f"{BRIDGE_URL}/api/"
    assert http_stub.last_call.params is None
    assert camera.status is CameraStatus.ONLINE
    assert camera.streams.rtsp == "rtsp://192.168.1.100:8554/front-door"


@pytest.mark.asyncio
async def test_api_key_is_sent_as_query_parameter(http_stub) -> None:
    http_stub.json(200, {})
    gateway = WyzeBridgeGateway(BRIDGE_URL, api_key="bridge-key")

    assert await gateway.list_cameras() == []
    assert http_stub.last_call.params == {"api": "bridge-key"}


@pytest.mark.asyncio
async def test_get_camera_quotes_name_and_uses_custom_ports(http_stub) -> None:
    http_stub.json(200, {"nickname": "Side Gate", "connected": True, "enabled": False})
    gateway = WyzeBridgeGateway(
        BRIDGE_URL, stream_ports=StreamPorts(hls=9000, rtsp=9001, webrtc=9002)
    )

    camera = await gateway.get_camera("side gate")

    assert http_stub.last_call.url == f"{BRIDGE_URL}/api/side%20gate"
    assert camera.name == "Side Gate"
    assert camera.name_uri == "side gate"
    assert camera.status is CameraStatus.OFFLINE
    assert camera.stream_url.startswith("http://192.168.1.100:9000/")


@pytest.mark.asyncio
async def test_get_camera_not_found(http_stub) -> None:
    http_stub.json(404, {"error": "camera not found"})

    with pytest.raises(NotFoundError) as exc:
        await WyzeBridgeGateway(BRIDGE_URL).get_camera("attic")

    assert "attic" in exc.value.message


@pytest.mark.asyncio
async def test_get_camera_other_errors_propagate(http_stub) -> None:
    http_stub.text(500, "bridge crashed")

    with pytest.raises(UpstreamError) as exc:
        await WyzeBridgeGateway(BRIDGE_URL).get_camera("attic")

    assert exc.value.status == 500
    assert exc.value.message == "bridge crashed"
