from ip_sonar.models.common import ContinentCode, GeolocationRecord
from ip_sonar.models.request_models import (
    MAX_BATCH_SIZE,
    BatchLookupRequest,
    LocaleCode,
    LookupParameters,
    coerce_params,
    merge_params,
)
from ip_sonar.models.response_models import BatchLookupResponse, ErrorMessageResponse

__all__ = [
    "MAX_BATCH_SIZE",
    "BatchLookupRequest",
    "BatchLookupResponse",
    "ContinentCode",
    "ErrorMessageResponse",
    "GeolocationRecord",
    "LocaleCode",
    "LookupParameters",
    "coerce_params",
    "merge_params",
]
