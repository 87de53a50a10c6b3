from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

ANY = "any"


# ── Catalog and pipeline records ─────────────────────────────────────────


@dataclass(frozen=True)
class QuantityLogic:
    type: str
    value: float


@dataclass(frozen=True)
class ItemAttributes:
    activities: frozenset[str] = frozenset({ANY})
    weather_condition: frozenset[str] = frozenset({ANY})
    temp_min: float | None = None
    temp_max: float | None = None
    trip_type: str | None = None
    origin_country: frozenset[str] = frozenset()

    @property
    def has_temp_range(self) -> bool:
        return self.temp_min is not None and self.temp_max is not None


@dataclass(frozen=True)
class Item:
    id: str
    name: Mapping[str, str]
    category: Mapping[str, str]
    emoji: str
    attributes: ItemAttributes
    quantity_logic: QuantityLogic
    url: str | None = None

    @property
    def category_key(self) -> str:
        """English category name, the key every static table is indexed by."""
        return self.category.get("en", "")


@dataclass(frozen=True)
class TripContext:
    duration_days: int
    avg_temp: float
    weather_code: str
    activities: frozenset[str]
    lang: str
    trip_type: str
    origin_country: str
    destination: str


@dataclass(frozen=True)
class ScoredItem:
    item: Item
    score: float
    position: int


# ── Engine output ────────────────────────────────────────────────────────


class ProcessedItem(BaseModel):
    id: str
    name: str
    emoji: str
    category: str
    quantity: int
    note: str | None = None
    url: str | None = None
    score: float


class ChecklistGroup(BaseModel):
    group: str
    items: list[ProcessedItem]


# ── HTTP request / response ──────────────────────────────────────────────


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChecklistRequest(_CamelModel):
    destination: str = Field(..., min_length=1, description="Free-text destination name")
    start_date: date
    end_date: date
    activities: list[str] = Field(..., description='Activity tags, e.g. ["activity_beach"]')
    origin_country: str = Field(..., min_length=2, max_length=3)
    destination_country: str = Field(
        ..., min_length=2, max_length=3,
        description="Country code resolved by the geocoding step upstream",
    )
    avg_temp: float = Field(..., description="Average temperature over the trip in °C")
    weather_code: str = Field(..., min_length=1, description="Raw condition code, e.g. clear")
    weather_condition: str | None = Field(
        default=None, description="Human-readable condition used in the trip summary",
    )

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "ChecklistRequest":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1


class ChecklistItemOut(_CamelModel):
    id: str
    name: str
    emoji: str
    quantity: int
    note: str | None = None
    url: str | None = None
    category: str


class ChecklistCategoryOut(_CamelModel):
    category: str
    items: list[ChecklistItemOut]


class TripInfo(_CamelModel):
    destination_name: str
    duration_days: int
    weather_summary: str
    trip_type: str


class ChecklistResponse(_CamelModel):
    trip_info: TripInfo
    categories: list[ChecklistCategoryOut]
