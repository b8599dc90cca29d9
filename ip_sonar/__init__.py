"""Async Python client for the IP-Sonar geolocation API."""

from ip_sonar.client import IpSonarClient, create_client
from ip_sonar.config import ClientConfiguration
from ip_sonar.errors import (
    ApiError,
    ErrorKind,
    InvalidInputError,
    IpSonarError,
    NetworkError,
    RequestTimeoutError,
    UnknownError,
)
from ip_sonar.models import (
    BatchLookupRequest,
    BatchLookupResponse,
    ContinentCode,
    ErrorMessageResponse,
    GeolocationRecord,
    LocaleCode,
    LookupParameters,
)
from ip_sonar.version import SDK_VERSION, USER_AGENT

__all__ = [
    "SDK_VERSION",
    "USER_AGENT",
    "ApiError",
    "BatchLookupRequest",
    "BatchLookupResponse",
    "ClientConfiguration",
    "ContinentCode",
    "ErrorKind",
    "ErrorMessageResponse",
    "GeolocationRecord",
    "InvalidInputError",
    "IpSonarClient",
    "IpSonarError",
    "LocaleCode",
    "LookupParameters",
    "NetworkError",
    "RequestTimeoutError",
    "UnknownError",
    "create_client",
]
