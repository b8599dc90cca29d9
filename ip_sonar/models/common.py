from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ContinentCode(str, Enum):
    """Continent codes used in geolocation records."""

    africa = "AF"
    antarctica = "AN"
    asia = "AS"
    europe = "EU"
    north_america = "NA"
    oceania = "OC"
    south_america = "SA"


class GeolocationRecord(BaseModel):
    """Geolocation data for a single IP address as returned by IP-Sonar.

    Every field is optional because the API trims its output to whatever was
    requested through the `fields` query parameter. Keys the model does not
    know about are kept as extra attributes rather than dropped.
    """

    model_config = ConfigDict(extra="allow")

    ip: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    postal_code: str | None = None
    # Radius in kilometers within which the address is expected to be located.
    accuracy_radius: int | float | None = None
    # One of ContinentCode; not enforced.
    continent_code: str | None = None
    continent_name: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    subdivision_1_code: str | None = None
    subdivision_1_name: str | None = None
    subdivision_2_code: str | None = None
    subdivision_2_name: str | None = None
    city_name: str | None = None
    timezone: str | None = None
    is_in_eu: bool | None = None

    @field_validator(
        "ip",
        "postal_code",
        "continent_code",
        "continent_name",
        "country_code",
        "country_name",
        "subdivision_1_code",
        "subdivision_1_name",
        "subdivision_2_code",
        "subdivision_2_name",
        "city_name",
        "timezone",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        """Render scalar values as strings; anything else becomes None.

        Upstream data is not trusted to match the documented types, and one
        odd value must not fail the whole record (or the whole batch).
        """
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_lat_lon(cls, value: Any) -> float | None:
        """Allow latitude/longitude to be provided as strings, numbers, or null."""
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @field_validator("accuracy_radius", mode="before")
    @classmethod
    def _coerce_accuracy_radius(cls, value: Any) -> int | float | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @field_validator("is_in_eu", mode="before")
    @classmethod
    def _coerce_is_in_eu(cls, value: Any) -> bool | None:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        if value in (0, 1):
            return bool(value)
        return None
