from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Union

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from artemis.domain.entities.camera import CameraEntry, StreamEndpoints  # noqa: E402
from artemis.domain.entities.light import LightDevice  # noqa: E402

StubResult = Union[httpx.Response, Exception]


def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def text_response(status_code: int, body: str) -> httpx.Response:
    return httpx.Response(status_code, text=body)


class _StubAsyncClient:
    def __init__(self, stub: "HTTPStub"):
        self._stub = stub

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        self._stub.calls.append(
            SimpleNamespace(
                method=method, url=url, params=params, json=json, headers=headers
            )
        )
        if not self._stub.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        result = self._stub.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class HTTPStub:
    """Queue of canned responses served to every ``httpx.AsyncClient``."""

    def __init__(self) -> None:
        self.responses: List[StubResult] = []
        self.calls: List[SimpleNamespace] = []
        self.timeouts: List[Any] = []

    def queue(self, *results: StubResult) -> "HTTPStub":
        self.responses.extend(results)
        return self

    def json(self, status_code: int, payload: Any) -> "HTTPStub":
        return self.queue(json_response(status_code, payload))

    def text(self, status_code: int, body: str) -> "HTTPStub":
        return self.queue(text_response(status_code, body))

    def fail(self, error: Exception) -> "HTTPStub":
        return self.queue(error)

    @property
    def last_call(self) -> SimpleNamespace:
        return self.calls[-1]


@pytest.fixture()
def http_stub(monkeypatch) -> HTTPStub:
    stub = HTTPStub()

    def _client_factory(timeout: Any = None, **kwargs: Any) -> _StubAsyncClient:
        stub.timeouts.append(timeout)
        return _StubAsyncClient(stub)

    monkeypatch.setattr("httpx.AsyncClient", _client_factory)
    return stub


@pytest.fixture()
def sample_light() -> LightDevice:
    return LightDevice(
        device_id="AA:BB:CC:DD:EE:FF:00:11",
        name="Living Room Lamp",
        model="H6159",
        capabilities=["turn", "brightness", "color"],
    )


@pytest.fixture()
def sample_camera() -> CameraEntry:
    return CameraEntry(
        name="Front Door",
        name_uri="front-door",
        model="Wyze Cam v3",
        connected=True,
        enabled=True,
        streams=StreamEndpoints(
            hls="http://192.168.1.100:8888/front-door/stream.m3u8",
            rtsp="rtsp://192.168.1.100:8554/front-door",
            webrtc="http://192.168.1.100:8889/front-door/",
        ),
    )
