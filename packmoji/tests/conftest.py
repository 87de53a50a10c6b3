from __future__ import annotations

from types import MappingProxyType

import pytest

from packmoji.recommendations.models import (
    ANY,
    Item,
    ItemAttributes,
    QuantityLogic,
    ScoredItem,
    TripContext,
)


def _make_item(
    item_id: str,
    category: str = "Mystery",
    activities: tuple[str, ...] = (ANY,),
    weather: tuple[str, ...] = (ANY,),
    temp: tuple[float, float] | None = None,
    trip_type: str | None = None,
    origin: tuple[str, ...] = (),
    quantity: tuple[str, float] = ("fixed", 1),
    url: str | None = None,
    name: dict[str, str] | None = None,
    category_names: dict[str, str] | None = None,
) -> Item:
    return Item(
        id=item_id,
        name=MappingProxyType(name if name is not None else {"en": item_id.title()}),
        category=MappingProxyType(
            category_names if category_names is not None else {"en": category}
        ),
        emoji="📦",
        attributes=ItemAttributes(
            activities=frozenset(activities),
            weather_condition=frozenset(weather),
            temp_min=temp[0] if temp else None,
            temp_max=temp[1] if temp else None,
            trip_type=trip_type,
            origin_country=frozenset(origin),
        ),
        quantity_logic=QuantityLogic(type=quantity[0], value=quantity[1]),
        url=url,
    )


def _make_context(**overrides) -> TripContext:
    values = {
        "duration_days": 7,
        "avg_temp": 20.0,
        "weather_code": "clear",
        "activities": frozenset(),
        "lang": "en",
        "trip_type": "international",
        "origin_country": "CN",
        "destination": "Bali",
    }
    values.update(overrides)
    values["activities"] = frozenset(values["activities"])
    return TripContext(**values)


def _make_scored(item: Item, score: float, position: int = 0) -> ScoredItem:
    return ScoredItem(item=item, score=score, position=position)


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def make_context():
    return _make_context


@pytest.fixture
def make_scored():
    return _make_scored
