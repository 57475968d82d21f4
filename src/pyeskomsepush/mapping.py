"""Map decoded JSON documents onto response models."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, TypeVar

from .exceptions import (
    DataCorruptedError,
    DecodeError,
    KeyNotFoundError,
    TypeMismatchError,
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
    CheckAllowance,
    City,
    Event,
    NextStage,
    Schedule,
    ScheduleDay,
    Status,
    Topic,
    TopicsNearby,
)
from .util import parse_date, parse_int, parse_timestamp, utc_now

_LOGGER = logging.getLogger(__name__)
_T = TypeVar("_T")

REQUIRED_CITIES = ("eskom", "capetown")


def _join(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


class _Decoder:
    """Typed field access that reports failures with the source and field path."""

    def __init__(self, source: str, *, lenient_timestamps: bool = False) -> None:
        self._source = source
        self._lenient_timestamps = lenient_timestamps

    def object(self, value: Any, path: str) -> dict[str, Any]:
        if value is None:
            raise ValueNotFoundError(self._source, path, "object")
        if not isinstance(value, dict):
            raise TypeMismatchError(self._source, path, "object")
        return value

    def field(self, data: dict[str, Any], key: str, path: str) -> Any:
        if key not in data:
            raise KeyNotFoundError(self._source, key, path)
        return data[key]

    def string(self, data: dict[str, Any], key: str, path: str) -> str:
        value = self.field(data, key, path)
        field_path = _join(path, key)
        if value is None:
            raise ValueNotFoundError(self._source, field_path, "string")
        if not isinstance(value, str):
            raise TypeMismatchError(self._source, field_path, "string")
        return value

    def integer(self, data: dict[str, Any], key: str, path: str) -> int:
        value = self.field(data, key, path)
        field_path = _join(path, key)
        if value is None:
            raise ValueNotFoundError(self._source, field_path, "integer")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatchError(self._source, field_path, "integer")
        return value

    def number(self, data: dict[str, Any], key: str, path: str) -> float:
        value = self.field(data, key, path)
        field_path = _join(path, key)
        if value is None:
            raise ValueNotFoundError(self._source, field_path, "number")
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeMismatchError(self._source, field_path, "number")
        return float(value)

    def stage(self, data: dict[str, Any], key: str, path: str) -> int:
        # Stages are sent as strings; anything unparseable counts as stage 0.
        return parse_int(self.string(data, key, path))

    def timestamp(self, data: dict[str, Any], key: str, path: str) -> datetime:
        raw = self.string(data, key, path)
        try:
            return parse_timestamp(raw)
        except ValidationError as exc:
            field_path = _join(path, key)
            if not self._lenient_timestamps:
                raise DataCorruptedError(self._source, field_path) from exc
            _LOGGER.warning(
                "Unparseable timestamp %r at %s in %s; using current time",
                raw,
                field_path,
                self._source,
            )
            return utc_now()

    def date(self, data: dict[str, Any], key: str, path: str) -> date:
        raw = self.string(data, key, path)
        try:
            return parse_date(raw)
        except ValidationError as exc:
            raise DataCorruptedError(self._source, _join(path, key)) from exc

    def items(
        self,
        data: dict[str, Any],
        key: str,
        path: str,
        mapper: Callable[[Any, str], _T],
    ) -> list[_T]:
        value = self.field(data, key, path)
        field_path = _join(path, key)
        if value is None:
            raise ValueNotFoundError(self._source, field_path, "array")
        if not isinstance(value, list):
            raise TypeMismatchError(self._source, field_path, "array")
        return [mapper(item, _join(field_path, index)) for index, item in enumerate(value)]

    def string_grid(self, data: dict[str, Any], key: str, path: str) -> list[list[str]]:
        def row(value: Any, row_path: str) -> list[str]:
            if not isinstance(value, list):
                raise TypeMismatchError(self._source, row_path, "array")
            for index, item in enumerate(value):
                if not isinstance(item, str):
                    raise TypeMismatchError(self._source, _join(row_path, index), "string")
            return list(value)

        return self.items(data, key, path, row)


def map_status(data: Any, source: str, *, lenient_timestamps: bool = False) -> Status:
    decoder = _Decoder(source, lenient_timestamps=lenient_timestamps)

    def next_stage(value: Any, path: str) -> NextStage:
        item = decoder.object(value, path)
        return NextStage(
            stage=decoder.stage(item, "stage", path),
            stage_start=decoder.timestamp(item, "stage_start_timestamp", path),
        )

    def city(key: str, value: Any, path: str) -> City:
        item = decoder.object(value, path)
        return City(
            key=key,
            name=decoder.string(item, "name", path),
            stage=decoder.stage(item, "stage", path),
            next_stages=decoder.items(item, "next_stages", path, next_stage),
            stage_updated=decoder.timestamp(item, "stage_updated", path),
        )

    root = decoder.object(data, "")
    raw_cities = decoder.object(decoder.field(root, "status", ""), "status")
    cities = {
        key: city(key, decoder.field(raw_cities, key, "status"), _join("status", key))
        for key in REQUIRED_CITIES
    }
    for key, value in raw_cities.items():
        if key in cities:
            continue
        # Overrides beyond the required cities are optional.
        try:
            cities[key] = city(key, value, _join("status", key))
        except DecodeError as exc:
            _LOGGER.warning("Skipping municipal status %r from %s: %s", key, source, exc)
    return Status(cities=cities)


def map_area_information(
    data: Any,
    source: str,
    *,
    lenient_timestamps: bool = False,
) -> AreaInformation:
    decoder = _Decoder(source, lenient_timestamps=lenient_timestamps)

    def event(value: Any, path: str) -> Event:
        item = decoder.object(value, path)
        return Event(
            note=decoder.string(item, "note", path),
            start=decoder.timestamp(item, "start", path),
            end=decoder.timestamp(item, "end", path),
        )

    def day(value: Any, path: str) -> ScheduleDay:
        item = decoder.object(value, path)
        return ScheduleDay(
            date=decoder.date(item, "date", path),
            name=decoder.string(item, "name", path),
            stages=decoder.string_grid(item, "stages", path),
        )

    root = decoder.object(data, "")
    info = decoder.object(decoder.field(root, "info", ""), "info")
    schedule = decoder.object(decoder.field(root, "schedule", ""), "schedule")
    return AreaInformation(
        events=decoder.items(root, "events", "", event),
        info=AreaInfo(
            name=decoder.string(info, "name", "info"),
            region=decoder.string(info, "region", "info"),
        ),
        schedule=Schedule(
            days=decoder.items(schedule, "days", "schedule", day),
            source=decoder.string(schedule, "source", "schedule"),
        ),
    )


def map_areas_nearby(data: Any, source: str, *, lenient_timestamps: bool = False) -> AreasNearby:
    decoder = _Decoder(source, lenient_timestamps=lenient_timestamps)

    def area(value: Any, path: str) -> AreaNearby:
        item = decoder.object(value, path)
        return AreaNearby(
            id=decoder.string(item, "id", path),
            name=decoder.string(item, "name", path),
            region=decoder.string(item, "region", path),
            count=decoder.integer(item, "count", path),
        )

    root = decoder.object(data, "")
    return AreasNearby(areas=decoder.items(root, "areas", "", area))


def map_areas_search(data: Any, source: str, *, lenient_timestamps: bool = False) -> AreasSearch:
    decoder = _Decoder(source, lenient_timestamps=lenient_timestamps)

    def area(value: Any, path: str) -> AreaSearch:
        item = decoder.object(value, path)
        return AreaSearch(
            id=decoder.string(item, "id", path),
            name=decoder.string(item, "name", path),
            region=decoder.string(item, "region", path),
        )

    root = decoder.object(data, "")
    return AreasSearch(areas=decoder.items(root, "areas", "", area))


def map_topics_nearby(
    data: Any,
    source: str,
    *,
    lenient_timestamps: bool = False,
) -> TopicsNearby:
    decoder = _Decoder(source, lenient_timestamps=lenient_timestamps)

    def topic(value: Any, path: str) -> Topic:
        item = decoder.object(value, path)
        return Topic(
            body=decoder.string(item, "body", path),
            category=decoder.string(item, "category", path),
            distance=decoder.number(item, "distance", path),
            followers=decoder.integer(item, "followers", path),
            active=decoder.timestamp(item, "active", path),
            timestamp=decoder.timestamp(item, "timestamp", path),
        )

    root = decoder.object(data, "")
    return TopicsNearby(topics=decoder.items(root, "topics", "", topic))


def map_check_allowance(
    data: Any,
    source: str,
    *,
    lenient_timestamps: bool = False,
) -> CheckAllowance:
    decoder = _Decoder(source, lenient_timestamps=lenient_timestamps)
    root = decoder.object(data, "")
    allowance = decoder.object(decoder.field(root, "allowance", ""), "allowance")
    return CheckAllowance(
        allowance=Allowance(
            count=decoder.integer(allowance, "count", "allowance"),
            limit=decoder.integer(allowance, "limit", "allowance"),
            type=decoder.string(allowance, "type", "allowance"),
        )
    )
