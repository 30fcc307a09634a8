"""
Shared fixtures: a fake IHttpClient and a WgerClient wired to it.
"""

import json
import time
from typing import Any

import pytest

from tests.fixtures import load_bytes
from wger_catalog.ingestion.adapters.wger_plugin.client import WgerClient
from wger_catalog.ingestion.config.value_objects import WgerConfig
from wger_catalog.ingestion.ports.http import HttpResponse

BASE_URL = "https://wger.test/api/v2"


def json_response(status_code: int, payload: Any) -> HttpResponse:
    return HttpResponse(status_code=status_code, body=json.dumps(payload).encode())


class FakeHttpClient:
    """In-memory IHttpClient.

    Responses are registered per URL; each value is an HttpResponse or an
    exception instance to raise. Unregistered URLs answer 404 "Not found.".
    """

    def __init__(self):
        self.responses: dict[str, HttpResponse | BaseException] = {}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | BaseException) -> None:
        self.responses[url] = response

    async def get(self, url, params=None, headers=None, timeout=None) -> HttpResponse:
        self.calls.append(
            {"url": url, "params": params, "at": time.monotonic()}
        )
        response = self.responses.get(url)
        if response is None:
            return json_response(404, {"detail": "Not found."})
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]


def detail_url(exercise_id: int) -> str:
    return f"{BASE_URL}/exerciseinfo/{exercise_id}"


def exercise_payload(exercise_id: int, **fields) -> dict:
    payload = {"id": exercise_id, "name": f"Exercise {exercise_id}", "variations": []}
    payload.update(fields)
    return payload


@pytest.fixture
def http_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def wger_config() -> WgerConfig:
    return WgerConfig(base_url=BASE_URL, variation_delay=0.0)


@pytest.fixture
def client(wger_config, http_client) -> WgerClient:
    return WgerClient(config=wger_config, http_client=http_client)


@pytest.fixture
def detail_body() -> bytes:
    return load_bytes("exercise_detail")


@pytest.fixture
def page_body() -> bytes:
    return load_bytes("exercise_page")
