from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ip_sonar.config import ClientConfiguration
from ip_sonar.errors import ApiError, InvalidInputError, describe_validation_error
from ip_sonar.http import HttpTransport
from ip_sonar.logger import logger
from ip_sonar.models.common import GeolocationRecord
from ip_sonar.models.request_models import (
    MAX_BATCH_SIZE,
    BatchLookupRequest,
    LookupParameters,
    coerce_params,
    merge_params,
)
from ip_sonar.models.response_models import BatchLookupResponse

ModelT = TypeVar("ModelT", bound=BaseModel)

ParamsInput = LookupParameters | Mapping[str, Any] | None


class IpSonarClient:
    """Async client for the IP-Sonar geolocation API.

    Every call is an independent request/response round trip; the client keeps
    no state between calls besides its immutable configuration, so one instance
    can be shared by concurrent tasks.

    Example:
        client = IpSonarClient(api_key="your-api-key")
        info = await client.lookup_ip("8.8.8.8")
        print(info.city_name)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        default_params: ParamsInput = None,
        timeout: float | None = None,
        *,
        config: ClientConfiguration | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Configure the client from keyword settings or from a ClientConfiguration.

        The two forms are exclusive: passing `config` together with any other
        setting raises InvalidInputError. Unset settings take the defaults
        (base URL https://api.ip-sonar.com, timeout 10000 ms).
        """
        settings = {
            "api_key": api_key,
            "base_url": base_url,
            "default_params": coerce_params(default_params),
            "timeout": timeout,
        }
        given = {name: value for name, value in settings.items() if value is not None}
        if config is None:
            try:
                config = ClientConfiguration(**given)
            except ValidationError as exc:
                raise InvalidInputError(f"Invalid client configuration: {describe_validation_error(exc)}") from exc
        elif given:
            raise InvalidInputError(f"Pass either config or individual settings, not both (got {sorted(given)})")
        self._config = config
        secret = config.api_key.get_secret_value() if config.api_key is not None else None
        self._http = HttpTransport(config.base_url, secret, config.timeout, transport=transport)

    @classmethod
    def from_config(
        cls,
        config: ClientConfiguration,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "IpSonarClient":
        """Create a client from an existing ClientConfiguration."""
        return cls(config=config, transport=transport)

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    async def lookup_my_ip(self, params: ParamsInput = None, timeout: float | None = None) -> GeolocationRecord:
        """Look up geolocation information for the caller's own IP address."""
        merged = merge_params(self._config.default_params, coerce_params(params))
        logger.debug(f"Performing client IP lookup params={merged}")
        data = await self._http.get("/v1/myip", merged, timeout)
        return self._decode(GeolocationRecord, data)

    async def lookup_ip(self, ip: str, params: ParamsInput = None, timeout: float | None = None) -> GeolocationRecord:
        """Look up geolocation information for an explicit IP address.

        Raises InvalidInputError before any network call when `ip` is empty
        or not a string.
        """
        if not ip or not isinstance(ip, str):
            raise InvalidInputError("IP address is required and must be a string")

        merged = merge_params(self._config.default_params, coerce_params(params))
        logger.debug(f"Performing explicit IP lookup ip={ip} params={merged}")
        data = await self._http.get(f"/v1/{quote(ip, safe='')}", merged, timeout)
        return self._decode(GeolocationRecord, data)

    async def batch_lookup(
        self,
        ips: list[str],
        params: ParamsInput = None,
        timeout: float | None = None,
    ) -> BatchLookupResponse:
        """Look up geolocation information for up to 100 addresses in one request.

        The whole batch fails if the request fails. Results are returned in the
        order the API sends them, which is the order of `ips`.
        """
        if not isinstance(ips, (list, tuple)) or len(ips) == 0:
            raise InvalidInputError("IPs array is required and must not be empty")

        if len(ips) > MAX_BATCH_SIZE:
            raise InvalidInputError(f"Maximum of {MAX_BATCH_SIZE} IP addresses allowed per batch request")

        for index, ip in enumerate(ips):
            if not ip or not isinstance(ip, str):
                raise InvalidInputError(f"IP at index {index} must be a non-empty string")

        request_body = BatchLookupRequest(data=list(ips))
        merged = merge_params(self._config.default_params, coerce_params(params))
        logger.debug(f"Performing batch IP lookup count={len(ips)} params={merged}")
        data = await self._http.post("/v1/batch", request_body.model_dump(), merged, timeout)
        return self._decode(BatchLookupResponse, data)

    @staticmethod
    def _decode(model: type[ModelT], data: Any) -> ModelT:
        """Validate a decoded JSON payload into `model`."""
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.error(f"Unexpected response payload model={model.__name__} errors={exc.errors()}")
            raise ApiError(f"Unexpected response payload for {model.__name__}", body=data) from exc


def create_client(config: ClientConfiguration | None = None, **kwargs: Any) -> IpSonarClient:
    """Create a new IpSonarClient.

    Pass either a ClientConfiguration or the keyword arguments accepted by
    IpSonarClient, e.g. create_client(api_key="...", default_params={"locale_code": "en"}).
    `transport` may accompany a config; other settings may not.
    """
    return IpSonarClient(config=config, **kwargs)
