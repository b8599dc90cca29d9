import asyncio
from typing import Any

import httpx

from ip_sonar.errors import ApiError, NetworkError, RequestTimeoutError, UnknownError
from ip_sonar.logger import logger
from ip_sonar.models.request_models import LookupParameters
from ip_sonar.version import USER_AGENT


class HttpTransport:
    """Performs a single HTTP exchange with the API and normalizes its outcome.

    A fresh httpx.AsyncClient is opened for every call; nothing is shared
    between concurrent requests. Timeouts are expressed in milliseconds.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        default_timeout: float = 10000,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._default_timeout = default_timeout
        self._transport = transport

    async def get(
        self,
        endpoint: str,
        params: LookupParameters | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Make a GET request to `endpoint` and return the decoded JSON body."""
        return await self._request("GET", endpoint, params=params, timeout=timeout)

    async def post(
        self,
        endpoint: str,
        body: Any,
        params: LookupParameters | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Make a POST request with a JSON `body` and return the decoded JSON body."""
        return await self._request("POST", endpoint, params=params, body=body, timeout=timeout)

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self._api_key:
            headers["x-api-key"] = self._api_key
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: LookupParameters | None,
        timeout: float | None,
        body: Any = None,
    ) -> Any:
        """Send the request under a deadline and classify whatever comes back.

        `asyncio.wait_for` cancels the in-flight exchange once the deadline passes.
        """
        url = f"{self._base_url}{endpoint}"
        query = params.to_query_params() if params is not None else None
        timeout_ms = timeout if timeout is not None else self._default_timeout
        timeout_seconds = timeout_ms / 1000

        logger.debug(f"Sending request method={method} url={url} params={query} timeout_ms={timeout_ms}")

        try:
            response = await asyncio.wait_for(
                self._send(method, url, query=query, body=body, timeout_seconds=timeout_seconds),
                timeout=timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning(f"Request timed out method={method} url={url} timeout_ms={timeout_ms}")
            raise RequestTimeoutError("Request timeout") from exc
        except httpx.TransportError as exc:
            logger.warning(f"Network error method={method} url={url} error={repr(exc)}")
            raise NetworkError("Network error: Failed to connect to API") from exc
        except Exception as exc:
            logger.warning(f"Unexpected request failure method={method} url={url} error={repr(exc)}")
            raise UnknownError(f"Request failed: {exc}") from exc

        if not response.is_success:
            error = self._build_api_error(response)
            logger.warning(
                f"API returned an error method={method} url={url} status={error.status} message={error.message}"
            )
            raise error

        return self._parse_json(response)

    async def _send(
        self,
        method: str,
        url: str,
        *,
        query: dict[str, str] | None,
        body: Any,
        timeout_seconds: float,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            return await client.request(
                method,
                url,
                params=query,
                headers=self._build_headers(),
                json=body,
            )

    @staticmethod
    def _build_api_error(response: httpx.Response) -> ApiError:
        """Map a non-success response into an ApiError.

        The body is decoded as JSON when possible; an object with a string
        `message` supplies the error message. Otherwise the raw text is kept
        (None for an empty body) and the message falls back to the HTTP status line.
        """
        api_message: str | None = None
        error_body: Any
        try:
            error_body = response.json()
            if isinstance(error_body, dict) and isinstance(error_body.get("message"), str):
                api_message = error_body["message"]
        except ValueError:
            # httpx decodes text with replacement characters, so only an empty body yields None.
            error_body = response.text or None

        message = api_message or f"HTTP {response.status_code}: {response.reason_phrase}"
        return ApiError(message, status=response.status_code, body=error_body, api_message=api_message)

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(f"Failed to decode API response status={response.status_code} error={exc}")
            raise ApiError("Failed to parse response as JSON", status=response.status_code) from exc
