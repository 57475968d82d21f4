"""Bundled offline fixture loading."""

from __future__ import annotations

import json
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any

from ..const import FIXTURE_PACKAGE
from ..endpoint import Endpoint
from ..exceptions import BundleNotFoundError, DataCorruptedError, DecodingError

FIXTURE_FILES: dict[Endpoint, str] = {
    Endpoint.STATUS: "status.json",
    Endpoint.AREA_INFORMATION: "areaInformation.json",
    Endpoint.AREAS_NEARBY: "areasNearby.json",
    Endpoint.AREAS_SEARCH: "areasSearch.json",
    Endpoint.TOPICS_NEARBY: "topicsNearby.json",
    Endpoint.CHECK_ALLOWANCE: "checkAllowance.json",
}


def _fixture_root() -> Traversable:
    return resources.files(FIXTURE_PACKAGE)


def fixture_name(endpoint: Endpoint) -> str:
    try:
        return FIXTURE_FILES[endpoint]
    except KeyError as exc:
        raise BundleNotFoundError(str(endpoint)) from exc


def load_fixture_file(filename: str) -> Any:
    """Read and parse one bundled JSON document."""
    path = _fixture_root() / filename
    if not path.is_file():
        raise BundleNotFoundError(filename)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DecodingError(filename, "Fixture is not valid UTF-8.") from exc
    except OSError as exc:
        raise BundleNotFoundError(filename) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataCorruptedError(filename) from exc


def load_fixture(endpoint: Endpoint) -> tuple[str, Any]:
    """Return the fixture file name and parsed document for an endpoint."""
    filename = fixture_name(endpoint)
    return filename, load_fixture_file(filename)
