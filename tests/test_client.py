"""Tests for the async operator client."""

import json

import httpx
import pytest

from api import MalformedResponseError, NetworkError, OperatorClient, ServerError
from config import ConsoleConfig
from model import OperatorPayload

PAYLOAD = OperatorPayload(name="Carrier A", priority=1, weight=50, max_tps=100)


class TestListOperators:
    """Test OperatorClient.list_operators()."""

    @pytest.mark.asyncio
    async def test_returns_operators_in_server_order(self, seeded_server, make_client):
        client = make_client(seeded_server)
        operators = await client.list_operators()
        assert [op.name for op in operators] == ["Operator 1", "Operator 2"]
        assert operators[1].max_tps == 500

    @pytest.mark.asyncio
    async def test_requests_collection_url(self, fake_server, make_client):
        await make_client(fake_server).list_operators()
        request = fake_server.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "http://gateway.test/api/v1/operators/"

    @pytest.mark.asyncio
    async def test_sends_bearer_token_and_json_headers(self, fake_server, make_client):
        await make_client(fake_server).list_operators()
        headers = fake_server.requests[0].headers
        assert headers["Authorization"] == "Bearer test-token"
        assert headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_no_token_no_authorization_header(self, fake_server):
        client = OperatorClient(ConsoleConfig(api_base_url="http://gateway.test/api/v1"), transport=fake_server.transport)
        await client.list_operators()
        assert "Authorization" not in fake_server.requests[0].headers

    @pytest.mark.asyncio
    async def test_non_2xx_is_network_error(self, fake_server, make_client):
        fake_server.queue(httpx.Response(503, text="unavailable"))
        with pytest.raises(NetworkError) as exc:
            await make_client(fake_server).list_operators()
        assert exc.value.status_code == 503

    @pytest.mark.asyncio
    async def test_unparseable_body_is_malformed(self, fake_server, make_client):
        fake_server.queue(httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(MalformedResponseError) as exc:
            await make_client(fake_server).list_operators()
        assert exc.value.message == "Invalid response format from server"

    @pytest.mark.asyncio
    async def test_non_array_body_is_malformed(self, fake_server, make_client):
        fake_server.queue(httpx.Response(200, json={"operators": []}))
        with pytest.raises(MalformedResponseError):
            await make_client(fake_server).list_operators()

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self, fake_server, make_client):
        fake_server.queue(httpx.ConnectError("connection refused"))
        with pytest.raises(NetworkError) as exc:
            await make_client(fake_server).list_operators()
        assert exc.value.status_code is None

    @pytest.mark.asyncio
    async def test_undecodable_body_is_network_error(self, fake_server, make_client):
        """A body that fails Content-Encoding decoding is a request failure."""
        fake_server.queue(httpx.Response(200, headers={"Content-Encoding": "gzip"}, stream=httpx.ByteStream(b"not gzip")))
        with pytest.raises(NetworkError) as exc:
            await make_client(fake_server).list_operators()
        assert exc.value.message == "Failed to load operators"


class TestWrites:
    """Test create/update/delete."""

    @pytest.mark.asyncio
    async def test_create_posts_payload(self, fake_server, make_client):
        created = await make_client(fake_server).create_operator(PAYLOAD)
        request = fake_server.requests_for("POST")[0]
        assert json.loads(request.content) == {"name": "Carrier A", "priority": 1, "weight": 50, "maxTps": 100}
        assert created.id == 1
        assert created.status == "active"

    @pytest.mark.asyncio
    async def test_update_puts_to_item_url(self, seeded_server, make_client):
        updated = await make_client(seeded_server).update_operator(2, PAYLOAD)
        request = seeded_server.requests_for("PUT")[0]
        assert request.url.path == "/api/v1/operators/2"
        assert updated.name == "Carrier A"

    @pytest.mark.asyncio
    async def test_structured_error_is_server_error(self, fake_server, make_client):
        fake_server.queue(httpx.Response(400, json={"error": "name already exists"}))
        with pytest.raises(ServerError) as exc:
            await make_client(fake_server).create_operator(PAYLOAD)
        assert exc.value.message == "name already exists"
        assert exc.value.status_code == 400

    @pytest.mark.asyncio
    async def test_error_without_json_is_generic(self, fake_server, make_client):
        fake_server.queue(httpx.Response(500, text="Internal Server Error"))
        with pytest.raises(NetworkError) as exc:
            await make_client(fake_server).create_operator(PAYLOAD)
        assert exc.value.message.startswith("Failed to save operator: 500")

    @pytest.mark.asyncio
    async def test_error_json_without_error_field_is_generic(self, fake_server, make_client):
        fake_server.queue(httpx.Response(422, json={"detail": "bad"}))
        with pytest.raises(NetworkError):
            await make_client(fake_server).update_operator(1, PAYLOAD)

    @pytest.mark.asyncio
    async def test_success_with_garbage_body_is_malformed(self, fake_server, make_client):
        fake_server.queue(httpx.Response(201, text="created!"))
        with pytest.raises(MalformedResponseError):
            await make_client(fake_server).create_operator(PAYLOAD)

    @pytest.mark.asyncio
    async def test_success_with_empty_body(self, fake_server, make_client):
        fake_server.queue(httpx.Response(204))
        assert await make_client(fake_server).create_operator(PAYLOAD) is None

    @pytest.mark.asyncio
    async def test_delete_ignores_ack_body(self, seeded_server, make_client):
        await make_client(seeded_server).delete_operator(1)
        assert [op["id"] for op in seeded_server.operators] == [2]

    @pytest.mark.asyncio
    async def test_delete_failure(self, fake_server, make_client):
        with pytest.raises(ServerError):
            await make_client(fake_server).delete_operator(99)

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, fake_server, console_config):
        async with OperatorClient(console_config, transport=fake_server.transport) as client:
            await client.list_operators()
        assert client._http.is_closed
