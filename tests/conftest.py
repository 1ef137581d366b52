"""Shared pytest fixtures and helpers.

The InfluxDB server is replaced by an ``httpx.MockTransport`` that records
every request it receives, so tests run without any live service and can
assert that no request was sent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

from influx2lp.config import Config, new_config
from influx2lp.models import LPMetric

# ── Constants ─────────────────────────────────────────────────────────────────

FAKE_HOST = "http://influxdb.test:8086"
FAKE_TIMESTAMP = 1_700_000_000_123_456_789

# ── Recording transport ───────────────────────────────────────────────────────


class RecordingServer:
    """Canned-response InfluxDB stand-in that keeps every request it receives."""

    def __init__(self, status_code: int = 204, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep INFLUX_* variables and any .env file out of Config."""
    for name in ("HOST", "PATH", "ORG", "BUCKET", "TOKEN", "USER_AGENT", "TIMEOUT"):
        monkeypatch.delenv(f"INFLUX_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def metric() -> LPMetric:
    return LPMetric(
        measurement="test-measurement",
        tags={"mytag1": "myvalue1", "mytag2": "myvalue2"},
        fields={"field1": 1.23, "field2": 4, "field3": "abcABC"},
        timestamp=FAKE_TIMESTAMP,
    )


@pytest.fixture()
def config() -> Config:
    return new_config(host=FAKE_HOST, bucket="testbucket", org="testorg", token="s3cr3t")


@pytest.fixture()
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture()
def make_client() -> Iterator[Callable[[RecordingServer], httpx.Client]]:
    clients: list[httpx.Client] = []

    def _make(handler: RecordingServer) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler), timeout=1.0)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture()
def client(
    server: RecordingServer, make_client: Callable[[RecordingServer], httpx.Client]
) -> httpx.Client:
    return make_client(server)
