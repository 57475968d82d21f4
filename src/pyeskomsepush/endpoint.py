"""Request descriptors for the supported API operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .const import (
    ALLOWANCE_ENDPOINT,
    AREA_INFORMATION_ENDPOINT,
    AREAS_NEARBY_ENDPOINT,
    AREAS_SEARCH_ENDPOINT,
    DEFAULT_HEADERS,
    PARAM_ID,
    PARAM_LATITUDE,
    PARAM_LONGITUDE,
    PARAM_TEST,
    PARAM_TEXT,
    STATUS_ENDPOINT,
    TOPICS_NEARBY_ENDPOINT,
)
from .exceptions import ValidationError
from .models import AreaTestMode
from .util import format_coordinate, require_text


class Endpoint(StrEnum):
    STATUS = "status"
    AREA_INFORMATION = "area_information"
    AREAS_NEARBY = "areas_nearby"
    AREAS_SEARCH = "areas_search"
    TOPICS_NEARBY = "topics_nearby"
    CHECK_ALLOWANCE = "check_allowance"


@dataclass(frozen=True, slots=True)
class EndpointRequest:
    """Wire-level description of one API call."""

    endpoint: Endpoint
    path: str
    params: dict[str, str] = field(default_factory=dict)
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))


def _coordinates(latitude: float, longitude: float) -> dict[str, str]:
    return {
        PARAM_LATITUDE: format_coordinate(latitude, "latitude", limit=90),
        PARAM_LONGITUDE: format_coordinate(longitude, "longitude", limit=180),
    }


def _normalize_test_mode(test: AreaTestMode | str | None) -> AreaTestMode | None:
    if test is None:
        return None
    try:
        return AreaTestMode(test)
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in AreaTestMode)
        raise ValidationError(f"test must be one of: {allowed}.") from exc


def status_request() -> EndpointRequest:
    return EndpointRequest(Endpoint.STATUS, STATUS_ENDPOINT)


def area_information_request(
    area_id: str,
    test: AreaTestMode | str | None = None,
) -> EndpointRequest:
    params = {PARAM_ID: require_text(area_id, "area_id")}
    mode = _normalize_test_mode(test)
    if mode is not None:
        params[PARAM_TEST] = mode.value
    return EndpointRequest(Endpoint.AREA_INFORMATION, AREA_INFORMATION_ENDPOINT, params)


def areas_nearby_request(latitude: float, longitude: float) -> EndpointRequest:
    return EndpointRequest(
        Endpoint.AREAS_NEARBY,
        AREAS_NEARBY_ENDPOINT,
        _coordinates(latitude, longitude),
    )


def areas_search_request(text: str) -> EndpointRequest:
    return EndpointRequest(
        Endpoint.AREAS_SEARCH,
        AREAS_SEARCH_ENDPOINT,
        {PARAM_TEXT: require_text(text, "text")},
    )


def topics_nearby_request(latitude: float, longitude: float) -> EndpointRequest:
    return EndpointRequest(
        Endpoint.TOPICS_NEARBY,
        TOPICS_NEARBY_ENDPOINT,
        _coordinates(latitude, longitude),
    )


def check_allowance_request() -> EndpointRequest:
    return EndpointRequest(Endpoint.CHECK_ALLOWANCE, ALLOWANCE_ENDPOINT)
