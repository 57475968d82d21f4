from __future__ import annotations

import copy
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pytest

from pyeskomsepush.exceptions import (
    DataCorruptedError,
    KeyNotFoundError,
    TypeMismatchError,
    ValueNotFoundError,
)
from pyeskomsepush.mapping import (
    map_area_information,
    map_areas_nearby,
    map_areas_search,
    map_check_allowance,
    map_status,
    map_topics_nearby,
)

_STATUS: dict[str, Any] = {
    "status": {
        "capetown": {
            "name": "Cape Town",
            "next_stages": [
                {"stage": "1", "stage_start_timestamp": "2023-06-01T10:00:00+02:00"},
                {"stage": "3", "stage_start_timestamp": "2023-06-01T16:00:00.000+02:00"},
            ],
            "stage": "2",
            "stage_updated": "2023-06-01T08:21:32.227454+02:00",
        },
        "eskom": {
            "name": "Eskom",
            "next_stages": [],
            "stage": "N/A",
            "stage_updated": "2023-06-01T07:58:10Z",
        },
    }
}

_AREA: dict[str, Any] = {
    "events": [
        {
            "end": "2023-06-01T22:30:00+02:00",
            "note": "Stage 3",
            "start": "2023-06-01T20:00:00+02:00",
        }
    ],
    "info": {"name": "TESTING Constantia Kloof (11)", "region": "JHB City Power"},
    "schedule": {
        "days": [
            {
                "date": "2023-06-01",
                "name": "Thursday",
                "stages": [["20:00-22:30"], ["04:00-06:30", "20:00-22:30"]],
            }
        ],
        "source": "https://www.citypower.co.za/",
    },
}


def test_map_status() -> None:
    status = map_status(_STATUS, "status.json")
    assert set(status.cities) == {"eskom", "capetown"}
    assert status.capetown.name == "Cape Town"
    assert status.capetown.key == "capetown"
    assert status.capetown.stage == 2
    assert [stage.stage for stage in status.capetown.next_stages] == [1, 3]
    assert status.capetown.next_stages[0].stage_start == datetime(2023, 6, 1, 8, 0, tzinfo=UTC)
    assert status.capetown.stage_updated.microsecond == 227454


def test_map_status_unparseable_stage_is_zero() -> None:
    status = map_status(_STATUS, "status.json")
    assert status.eskom.stage == 0
    assert status.eskom.next_stages == []


def test_map_status_keeps_municipal_overrides() -> None:
    data = copy.deepcopy(_STATUS)
    data["status"]["ethekwini"] = copy.deepcopy(data["status"]["eskom"])
    data["status"]["ethekwini"]["name"] = "eThekwini"
    status = map_status(data, "status.json")
    assert status.cities["ethekwini"].name == "eThekwini"


def test_map_status_skips_malformed_municipal_override(caplog: pytest.LogCaptureFixture) -> None:
    data = copy.deepcopy(_STATUS)
    data["status"]["joburg"] = {"name": "Joburg", "stage": "2"}
    with caplog.at_level("WARNING", logger="pyeskomsepush.mapping"):
        status = map_status(data, "status.json")
    assert set(status.cities) == {"eskom", "capetown"}
    assert status.capetown.stage == 2
    assert "joburg" in caplog.text


def test_map_status_required_city_stays_strict() -> None:
    data = copy.deepcopy(_STATUS)
    del data["status"]["capetown"]["next_stages"]
    data["status"]["joburg"] = {"name": "Joburg", "stage": "2"}
    with pytest.raises(KeyNotFoundError) as excinfo:
        map_status(data, "status.json")
    assert excinfo.value.path == "status.capetown"


def test_map_status_requires_both_cities() -> None:
    data = copy.deepcopy(_STATUS)
    del data["status"]["capetown"]
    with pytest.raises(KeyNotFoundError) as excinfo:
        map_status(data, "status.json")
    assert excinfo.value.key == "capetown"
    assert excinfo.value.path == "status"
    assert excinfo.value.source == "status.json"


def test_map_status_missing_key_reports_path() -> None:
    data = copy.deepcopy(_STATUS)
    del data["status"]["eskom"]["stage_updated"]
    with pytest.raises(KeyNotFoundError) as excinfo:
        map_status(data, "https://example/status")
    assert excinfo.value.key == "stage_updated"
    assert excinfo.value.path == "status.eskom"
    assert excinfo.value.source == "https://example/status"


def test_map_status_type_mismatch() -> None:
    data = copy.deepcopy(_STATUS)
    data["status"]["capetown"]["next_stages"][1]["stage"] = 3
    with pytest.raises(TypeMismatchError) as excinfo:
        map_status(data, "status.json")
    assert excinfo.value.path == "status.capetown.next_stages[1].stage"
    assert excinfo.value.expected == "string"


def test_map_status_value_not_found() -> None:
    data = copy.deepcopy(_STATUS)
    data["status"]["eskom"]["name"] = None
    with pytest.raises(ValueNotFoundError) as excinfo:
        map_status(data, "status.json")
    assert excinfo.value.path == "status.eskom.name"


def test_map_status_root_must_be_object() -> None:
    with pytest.raises(TypeMismatchError):
        map_status([], "status.json")
    with pytest.raises(ValueNotFoundError):
        map_status(None, "status.json")


def test_map_status_invalid_timestamp_is_corrupted() -> None:
    data = copy.deepcopy(_STATUS)
    data["status"]["eskom"]["stage_updated"] = "yesterday"
    with pytest.raises(DataCorruptedError) as excinfo:
        map_status(data, "status.json")
    assert excinfo.value.path == "status.eskom.stage_updated"


def test_map_status_lenient_timestamp_uses_now(caplog: pytest.LogCaptureFixture) -> None:
    data = copy.deepcopy(_STATUS)
    data["status"]["eskom"]["stage_updated"] = "yesterday"
    before = datetime.now(UTC)
    with caplog.at_level("WARNING", logger="pyeskomsepush.mapping"):
        status = map_status(data, "status.json", lenient_timestamps=True)
    after = datetime.now(UTC)
    assert before <= status.eskom.stage_updated <= after
    assert "status.eskom.stage_updated" in caplog.text


def test_map_area_information() -> None:
    area = map_area_information(_AREA, "areaInformation.json")
    assert area.info.name == "TESTING Constantia Kloof (11)"
    assert area.info.region == "JHB City Power"
    assert area.is_test_data is True
    assert len(area.events) == 1
    assert area.events[0].note == "Stage 3"
    assert area.events[0].duration == timedelta(hours=2, minutes=30)
    day = area.schedule.days[0]
    assert day.date == date(2023, 6, 1)
    assert day.name == "Thursday"
    assert day.stages[1] == ["04:00-06:30", "20:00-22:30"]
    assert area.schedule.source == "https://www.citypower.co.za/"


def test_map_area_information_invalid_schedule() -> None:
    data = copy.deepcopy(_AREA)
    data["schedule"]["days"][0]["stages"][0] = ["20:00-22:30", 5]
    with pytest.raises(TypeMismatchError) as excinfo:
        map_area_information(data, "areaInformation.json")
    assert excinfo.value.path == "schedule.days[0].stages[0][1]"


def test_map_area_information_invalid_date() -> None:
    data = copy.deepcopy(_AREA)
    data["schedule"]["days"][0]["date"] = "Thursday"
    with pytest.raises(DataCorruptedError):
        map_area_information(data, "areaInformation.json")


def test_map_area_information_missing_info() -> None:
    data = copy.deepcopy(_AREA)
    del data["info"]
    with pytest.raises(KeyNotFoundError) as excinfo:
        map_area_information(data, "areaInformation.json")
    assert excinfo.value.key == "info"


def test_map_areas_nearby_and_search() -> None:
    area = {"id": "eskde-10-x", "name": "X (10)", "region": "Eskom Direct"}
    nearby = map_areas_nearby({"areas": [{**area, "count": -1}]}, "areasNearby.json")
    assert nearby.areas[0].id == "eskde-10-x"
    assert nearby.areas[0].count == -1
    search = map_areas_search({"areas": [area]}, "areasSearch.json")
    assert search.areas[0].region == "Eskom Direct"
    assert map_areas_search({"areas": []}, "areasSearch.json").areas == []
    with pytest.raises(TypeMismatchError):
        map_areas_search({"areas": {}}, "areasSearch.json")


def test_map_topics_nearby() -> None:
    data = {
        "topics": [
            {
                "active": "2023-06-01T09:12:44.531Z",
                "body": "Power out",
                "category": "Electricity",
                "distance": 1,
                "followers": 4,
                "timestamp": "2023-06-01T08:41:03Z",
            }
        ]
    }
    topics = map_topics_nearby(data, "topicsNearby.json")
    topic = topics.topics[0]
    assert topic.distance == 1.0
    assert isinstance(topic.distance, float)
    assert topic.followers == 4
    assert topic.timestamp == datetime(2023, 6, 1, 8, 41, 3, tzinfo=UTC)

    data["topics"][0]["followers"] = "4"
    with pytest.raises(TypeMismatchError):
        map_topics_nearby(data, "topicsNearby.json")


def test_map_check_allowance() -> None:
    allowance = map_check_allowance(
        {"allowance": {"count": 12, "limit": 50, "type": "daily"}},
        "checkAllowance.json",
    )
    assert allowance.allowance.count == 12
    assert allowance.allowance.limit == 50
    assert allowance.allowance.type == "daily"
    with pytest.raises(TypeMismatchError):
        map_check_allowance(
            {"allowance": {"count": True, "limit": 50, "type": "daily"}},
            "checkAllowance.json",
        )
