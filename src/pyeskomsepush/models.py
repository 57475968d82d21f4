"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum

from .const import MAX_STAGE, TEST_DATA_PREFIX
from .exceptions import ValidationError


class AreaTestMode(StrEnum):
    """Sample data modes for area information requests.

    ``current`` returns an event occurring right now, ``future`` an event
    starting on the next hour. Test requests do not count towards the quota.
    """

    CURRENT = "current"
    FUTURE = "future"


class TopicCategory(StrEnum):
    ADVICE = "Advice"
    ELECTRICITY = "Electricity"
    WATER = "Water"
    GOOD_VIBES = "Good Vibes"
    INTERNET = "Internet"
    ROADS = "Roads"
    MISSING_PETS = "Missing Pets"
    EVENTS = "Events"
    FIRES = "Fires"
    SAFETY = "Safety"
    GAMING = "Gaming"


@dataclass(frozen=True, slots=True)
class NextStage:
    stage: int
    stage_start: datetime


@dataclass(frozen=True, slots=True)
class City:
    key: str
    name: str
    stage: int
    next_stages: list[NextStage]
    stage_updated: datetime


@dataclass(frozen=True, slots=True)
class Status:
    """National status and municipal overrides, keyed by the API's city key."""

    cities: dict[str, City]

    @property
    def eskom(self) -> City:
        return self.cities["eskom"]

    @property
    def capetown(self) -> City:
        return self.cities["capetown"]


@dataclass(frozen=True, slots=True)
class Event:
    note: str
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class AreaInfo:
    name: str
    region: str


@dataclass(frozen=True, slots=True)
class ScheduleDay:
    date: date
    name: str
    stages: list[list[str]]

    def slots_for_stage(self, stage: int) -> list[str]:
        """Return the outage windows (e.g. ``"20:00-22:30"``) for a stage.

        Some regions only publish stages 1-4; higher stages use the highest
        published schedule.
        """
        if isinstance(stage, bool) or not isinstance(stage, int):
            raise ValidationError("stage must be an integer.")
        if stage < 0 or stage > MAX_STAGE:
            raise ValidationError(f"stage must be between 0 and {MAX_STAGE}.")
        if stage == 0 or not self.stages:
            return []
        index = min(stage, len(self.stages)) - 1
        return list(self.stages[index])


@dataclass(frozen=True, slots=True)
class Schedule:
    days: list[ScheduleDay]
    source: str


@dataclass(frozen=True, slots=True)
class AreaInformation:
    events: list[Event]
    info: AreaInfo
    schedule: Schedule

    @property
    def is_test_data(self) -> bool:
        return self.info.name.startswith(TEST_DATA_PREFIX)


@dataclass(frozen=True, slots=True)
class AreaNearby:
    id: str
    name: str
    region: str
    count: int


@dataclass(frozen=True, slots=True)
class AreasNearby:
    areas: list[AreaNearby]


@dataclass(frozen=True, slots=True)
class AreaSearch:
    id: str
    name: str
    region: str


@dataclass(frozen=True, slots=True)
class AreasSearch:
    areas: list[AreaSearch]


@dataclass(frozen=True, slots=True)
class Topic:
    body: str
    category: str
    distance: float
    followers: int
    active: datetime
    timestamp: datetime

    @property
    def kind(self) -> TopicCategory | None:
        try:
            return TopicCategory(self.category)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class TopicsNearby:
    topics: list[Topic]


@dataclass(frozen=True, slots=True)
class Allowance:
    count: int
    limit: int
    type: str

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.count)


@dataclass(frozen=True, slots=True)
class CheckAllowance:
    allowance: Allowance
