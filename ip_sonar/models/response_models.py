from pydantic import BaseModel

from ip_sonar.models.common import GeolocationRecord


class BatchLookupResponse(BaseModel):
    """Response model for the batch lookup endpoint.

    Records come back in the same order as the submitted addresses.
    """

    data: list[GeolocationRecord]


class ErrorMessageResponse(BaseModel):
    """Error body returned by the API."""

    message: str
