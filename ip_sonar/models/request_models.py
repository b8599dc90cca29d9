from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ip_sonar.errors import InvalidInputError, describe_validation_error

MAX_BATCH_SIZE = 100


class LocaleCode(str, Enum):
    """Languages the API can localize geolocation names into."""

    de = "de"
    en = "en"
    es = "es"
    fr = "fr"
    ja = "ja"
    pt_br = "pt-br"
    ru = "ru"
    zh_cn = "zh-cn"


class LookupParameters(BaseModel):
    """Query parameters accepted by every lookup endpoint.

    Values are sent as given; neither `fields` nor `locale_code` is checked
    against the sets the API documents.
    """

    model_config = ConfigDict(frozen=True)

    fields: str | None = Field(
        default=None,
        description="Comma-separated list of fields to include in the response.",
        examples=["continent_name,country_code,city_name,timezone"],
    )
    locale_code: str | None = Field(
        default=None,
        description="Language code for geolocation names.",
        examples=["en", "pt-br"],
    )

    @field_validator("locale_code", mode="before")
    @classmethod
    def _unwrap_locale_code(cls, value: Any) -> Any:
        """Store LocaleCode members as their plain string value."""
        if isinstance(value, LocaleCode):
            return value.value
        return value

    def to_query_params(self) -> dict[str, str] | None:
        """Return the query parameters in wire order, or None when there are none."""
        query: dict[str, str] = {}
        if self.fields is not None:
            query["fields"] = self.fields
        if self.locale_code is not None:
            query["locale_code"] = self.locale_code
        return query or None


def coerce_params(params: LookupParameters | Mapping[str, Any] | None) -> LookupParameters | None:
    """Accept LookupParameters or a plain mapping; anything else is InvalidInputError."""
    if params is None or isinstance(params, LookupParameters):
        return params
    if not isinstance(params, Mapping):
        raise InvalidInputError(f"Lookup parameters must be a mapping, got {type(params).__name__}")
    try:
        return LookupParameters.model_validate(dict(params))
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid lookup parameters: {describe_validation_error(exc)}") from exc


def merge_params(
    defaults: LookupParameters | None,
    overrides: LookupParameters | None,
) -> LookupParameters | None:
    """Shallow-merge per-call parameters over the configured defaults.

    Only keys explicitly set on `overrides` replace the defaults. Returns None
    when both sides are absent so that no query string gets appended.
    """
    if defaults is None and overrides is None:
        return None

    merged: dict[str, Any] = {}
    if defaults is not None:
        merged.update(defaults.model_dump(exclude_unset=True))
    if overrides is not None:
        merged.update(overrides.model_dump(exclude_unset=True))
    return LookupParameters(**merged)


class BatchLookupRequest(BaseModel):
    """Request body for the batch lookup endpoint."""

    data: list[str] = Field(min_length=1, max_length=MAX_BATCH_SIZE)
