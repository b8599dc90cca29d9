import json
from collections.abc import Callable
from http import HTTPStatus
from typing import Any

import httpx


def make_response(
    status_code: int,
    payload: Any = None,
    text: str | None = None,
    method: str = "GET",
    url: str = "https://api.ip-sonar.com/v1/8.8.8.8",
) -> httpx.Response:
    """Build a real httpx.Response, either from a JSON payload or from raw text."""
    request = httpx.Request(method, url)
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=payload, request=request)


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient.

    Records the constructor kwargs and every request so tests can assert on them.
    """

    def __init__(self, response: httpx.Response, **client_kwargs: Any) -> None:
        self._response = response
        self.client_kwargs = client_kwargs
        self.requests: list[dict[str, Any]] = []

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self.requests.append({"method": method, "url": url, **kwargs})
        return self._response


class FailingAsyncClient:
    """Async client that raises a ConnectError on enter to simulate network failure."""

    def __init__(self, url: str, *args: Any, **kwargs: Any) -> None:
        self._url = url

    async def __aenter__(self) -> "FailingAsyncClient":
        request = httpx.Request("GET", self._url)
        raise httpx.ConnectError("Name or service not known", request=request)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return make_response(HTTPStatus.OK, payload={})


class RecordingTransport(httpx.MockTransport):
    """httpx.MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.requests: list[httpx.Request] = []

        async def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = handler(request)
            if not isinstance(result, httpx.Response):
                result = await result
            return result

        super().__init__(_handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def json_transport(payload: Any, status_code: int = HTTPStatus.OK) -> RecordingTransport:
    """Transport that answers every request with the same JSON payload."""
    return RecordingTransport(lambda request: httpx.Response(status_code, json=payload))
