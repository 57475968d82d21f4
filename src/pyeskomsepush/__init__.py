"""pyeskomsepush package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import EskomSePush
from .exceptions import (
    BadRequestError,
    BundleNotFoundError,
    DataCorruptedError,
    DecodeError,
    DecodingError,
    InvalidURLError,
    KeyNotFoundError,
    NoResponseError,
    NotAuthenticatedError,
    NotFoundError,
    PyEskomSePushError,
    RequestError,
    RequestTimeoutError,
    ServerError,
    TooManyRequestsError,
    TypeMismatchError,
    UnexpectedStatusError,
    ValidationError,
    ValueNotFoundError,
)
from .models import (
    Allowance,
    AreaInfo,
    AreaInformation,
    AreaNearby,
    AreaSearch,
    AreasNearby,
    AreasSearch,
    AreaTestMode,
    CheckAllowance,
    City,
    Event,
    NextStage,
    Schedule,
    ScheduleDay,
    Status,
    Topic,
    TopicCategory,
    TopicsNearby,
)

try:
    __version__ = version("pyeskomsepush")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "Allowance",
    "AreaInfo",
    "AreaInformation",
    "AreaNearby",
    "AreaSearch",
    "AreaTestMode",
    "AreasNearby",
    "AreasSearch",
    "BadRequestError",
    "BundleNotFoundError",
    "CheckAllowance",
    "City",
    "DataCorruptedError",
    "DecodeError",
    "DecodingError",
    "EskomSePush",
    "Event",
    "InvalidURLError",
    "KeyNotFoundError",
    "NextStage",
    "NoResponseError",
    "NotAuthenticatedError",
    "NotFoundError",
    "PyEskomSePushError",
    "RequestError",
    "RequestTimeoutError",
    "Schedule",
    "ScheduleDay",
    "ServerError",
    "Status",
    "Topic",
    "TopicCategory",
    "TopicsNearby",
    "TooManyRequestsError",
    "TypeMismatchError",
    "UnexpectedStatusError",
    "ValidationError",
    "ValueNotFoundError",
    "__version__",
]
