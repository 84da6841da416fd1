"""Async HTTP client for the gateway's operator endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from api.errors import MalformedResponseError, NetworkError, ServerError
from config import ConsoleConfig
from constants import MSG_DELETE_FAILED, MSG_LOAD_FAILED, MSG_SAVE_FAILED
from model import Operator, OperatorId, OperatorPayload

log = logging.getLogger(__name__)


def decode_body(response: httpx.Response) -> Any | None:
    """Decode a JSON body. Empty bodies decode to None.

    Raises:
        MalformedResponseError: If the body is present but not valid JSON
    """
    if not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(str(e)) from e


def error_for_response(response: httpx.Response, fallback: str) -> NetworkError | ServerError:
    """Map a non-2xx response to the matching error.

    A JSON body with an ``error`` string becomes a ServerError carrying that
    text verbatim. Anything else becomes a NetworkError with the fallback
    message plus the HTTP status.
    """
    try:
        data = decode_body(response)
    except MalformedResponseError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return ServerError(data["error"], response.status_code)
    return NetworkError(
        f"{fallback}: {response.status_code} {response.reason_phrase}".rstrip(),
        status_code=response.status_code,
    )


class OperatorClient:
    """Performs list/create/update/delete calls against ``/operators``.

    The client owns one httpx.AsyncClient built from the injected config.
    Use it as an async context manager, or call aclose() when done.

    Example usage:
        async with OperatorClient(ConsoleConfig.from_env()) as client:
            operators = await client.list_operators()
    """

    def __init__(
        self,
        config: ConsoleConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if config.api_token:
            headers["Authorization"] = f"Bearer {config.api_token}"
        self._http = httpx.AsyncClient(
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> OperatorClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _collection_url(self) -> str:
        return f"{self.config.operators_url}/"

    def _item_url(self, operator_id: OperatorId) -> str:
        return f"{self.config.operators_url}/{operator_id}"

    async def _send(self, method: str, url: str, failure: str, **kwargs: Any) -> httpx.Response:
        log.debug(f"{method} {url}")
        try:
            response = await self._http.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # Covers body decoding failures as well as the transport
            log.warning(f"{method} {url} failed: {e!r}")
            raise NetworkError(failure) from e
        log.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def list_operators(self) -> list[Operator]:
        """Fetch the full operator list in server order.

        Raises:
            NetworkError: On transport failure or non-2xx status
            MalformedResponseError: If the body is not a JSON array of operators
        """
        response = await self._send("GET", self._collection_url(), MSG_LOAD_FAILED)
        if not response.is_success:
            raise NetworkError(
                f"{MSG_LOAD_FAILED}: {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )
        data = decode_body(response)
        if not isinstance(data, list):
            raise MalformedResponseError(f"expected a JSON array, got {type(data).__name__}")
        try:
            return [Operator.from_dict(item) for item in data]
        except ValueError as e:
            raise MalformedResponseError(str(e)) from e

    async def create_operator(self, payload: OperatorPayload) -> Operator | None:
        """POST a new operator. Returns the echoed operator, if the server sent one."""
        return await self._write("POST", self._collection_url(), payload)

    async def update_operator(self, operator_id: OperatorId, payload: OperatorPayload) -> Operator | None:
        """PUT new values for an existing operator."""
        return await self._write("PUT", self._item_url(operator_id), payload)

    async def delete_operator(self, operator_id: OperatorId) -> None:
        """DELETE an operator. The acknowledgement body is not inspected."""
        url = self._item_url(operator_id)
        response = await self._send("DELETE", url, MSG_DELETE_FAILED)
        if not response.is_success:
            raise error_for_response(response, MSG_DELETE_FAILED)

    async def _write(self, method: str, url: str, payload: OperatorPayload) -> Operator | None:
        """Send a create/update body and decode the echoed operator.

        Raises:
            ServerError: Non-2xx with a JSON error message
            NetworkError: Transport failure or any other non-2xx
            MalformedResponseError: 2xx with a body that is not JSON
        """
        response = await self._send(method, url, MSG_SAVE_FAILED, json=payload.to_json())
        if not response.is_success:
            raise error_for_response(response, MSG_SAVE_FAILED)
        data = decode_body(response)
        if data is None:
            return None
        try:
            return Operator.from_dict(data)
        except ValueError as e:
            # The list refresh that follows every write is authoritative
            log.debug(f"{method} {url} echoed a non-operator body: {e}")
            return None
