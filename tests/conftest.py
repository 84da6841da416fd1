"""Shared fixtures for operator console tests."""

import json

import httpx
import pytest

from api import OperatorClient
from config import ConsoleConfig
from controller import NotificationChannel, OperatorStore, SyncController
from model import Operator

API_BASE = "http://gateway.test/api/v1"
OPERATORS_PATH = "/api/v1/operators"


class FakeOperatorServer:
    """In-memory stand-in for the gateway's operator endpoints.

    Assigns integer ids and a default "active" status like the real server.
    Responses queued with queue() are returned for the next requests, in
    order, before any routing happens.
    """

    def __init__(self, operators: list[dict] | None = None) -> None:
        self.operators = [dict(op) for op in operators or []]
        self.next_id = max((op["id"] for op in self.operators), default=0) + 1
        self.requests: list[httpx.Request] = []
        self._queued: list[httpx.Response | Exception] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def queue(self, item: httpx.Response | Exception) -> None:
        self._queued.append(item)

    def requests_for(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._queued:
            item = self._queued.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

        path = request.url.path
        if path == f"{OPERATORS_PATH}/":
            if request.method == "GET":
                return httpx.Response(200, json=self.operators)
            if request.method == "POST":
                body = json.loads(request.content)
                missing = [k for k in ("name", "priority", "weight", "maxTps") if k not in body]
                if missing:
                    return httpx.Response(400, json={"error": f"missing {', '.join(missing)}"})
                operator = {"id": self.next_id, **body, "status": "active"}
                self.next_id += 1
                self.operators.append(operator)
                return httpx.Response(201, json=operator)
        elif path.startswith(f"{OPERATORS_PATH}/"):
            op_id = path.rsplit("/", 1)[1]
            existing = next((op for op in self.operators if str(op["id"]) == op_id), None)
            if existing is None:
                return httpx.Response(404, json={"error": "operator not found"})
            if request.method == "PUT":
                existing.update(json.loads(request.content))
                return httpx.Response(200, json=existing)
            if request.method == "DELETE":
                self.operators.remove(existing)
                return httpx.Response(200, json={"message": f"Operator {op_id} deleted successfully"})
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture
def carrier_a():
    """The operator used throughout the examples."""
    return Operator(id=7, name="Carrier A", priority=1, weight=50, max_tps=100, status="active")


@pytest.fixture
def fake_server():
    """Empty fake server."""
    return FakeOperatorServer()


@pytest.fixture
def make_server():
    """Factory for a fake server seeded with the given operator dicts."""
    return FakeOperatorServer


@pytest.fixture
def seeded_server():
    """Fake server with two operators, mirroring the gateway's sample data."""
    return FakeOperatorServer([
        {"id": 1, "name": "Operator 1", "priority": 1, "weight": 100, "maxTps": 1000, "status": "active"},
        {"id": 2, "name": "Operator 2", "priority": 2, "weight": 50, "maxTps": 500, "status": "active"},
    ])


@pytest.fixture
def console_config():
    return ConsoleConfig(api_base_url=API_BASE, api_token="test-token")


@pytest.fixture
def make_client(console_config):
    """Factory building an OperatorClient wired to a fake server."""
    def _make(server: FakeOperatorServer) -> OperatorClient:
        return OperatorClient(console_config, transport=server.transport)
    return _make


@pytest.fixture
def notifications():
    """Channel that outlives any single test."""
    return NotificationChannel(timeout=30.0)


@pytest.fixture
def fast_notifications():
    """Channel with a short timeout so expiry can be observed."""
    return NotificationChannel(timeout=0.05)


@pytest.fixture
def make_stack(make_client, notifications):
    """Factory returning (store, controller) wired to a fake server."""
    def _make(server: FakeOperatorServer) -> tuple[OperatorStore, SyncController]:
        client = make_client(server)
        store = OperatorStore(client, notifications)
        return store, SyncController(store, client, notifications)
    return _make
