import os

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from ip_sonar.models.request_models import LookupParameters

DEFAULT_BASE_URL = "https://api.ip-sonar.com"
DEFAULT_TIMEOUT_MS = 10000


class ClientConfiguration(BaseModel):
    """Settings for an IpSonarClient, fixed for the lifetime of the client."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr | None = Field(default=None, description="API key sent as the x-api-key header.")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the IP-Sonar API.")
    default_params: LookupParameters | None = Field(
        default=None,
        description="Query parameters applied to every request unless overridden per call.",
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout in milliseconds.")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> "ClientConfiguration":
        """Build a configuration from IP_SONAR_* environment variables.

        Unset variables fall back to the defaults above.
        """
        values: dict[str, object] = {}
        if api_key := os.getenv("IP_SONAR_API_KEY"):
            values["api_key"] = api_key
        if base_url := os.getenv("IP_SONAR_BASE_URL"):
            values["base_url"] = base_url
        if timeout := os.getenv("IP_SONAR_TIMEOUT"):
            values["timeout"] = timeout
        return cls.model_validate(values)
