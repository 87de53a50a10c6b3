"""
Match scoring for catalog items.

Each item gets a 0-100 score for a trip as a weighted sum of six factors:

* category priority  (25)
* essential boost    (20, plus another 20 for international essentials)
* activity match     (20)
* weather match      (15)
* temperature match  (10)
* trip-type match    (10)

Duration bonuses for long trips are added on top and the total is clamped
to [0, 100] once, after everything has been summed. Because of that the two
essential boosts can push an item past 100 before the clamp; threshold
comparisons downstream see the clamped value.
"""
from __future__ import annotations

import logging

from .catalog import Catalog
from .models import ANY, Item, ScoredItem, TripContext
from .tables import (
    CATEGORY_PRIORITY,
    DEFAULT_PRIORITY,
    DURATION_BONUSES,
    ESSENTIAL_ITEMS,
    INTERNATIONAL_ESSENTIAL_ITEMS,
    WEATHER_CONDITION_MAP,
)

logger = logging.getLogger(__name__)

WEIGHTS = {
    "category": 25.0,
    "essential": 20.0,
    "activity": 20.0,
    "weather": 15.0,
    "temperature": 10.0,
    "trip_type": 10.0,
}

ANY_ACTIVITY_FACTOR = 0.3
ANY_WEATHER_FACTOR = 0.5
UNTYPED_TRIP_FACTOR = 0.3
TEMP_TOLERANCE = 5.0
TEMP_PARTIAL_FACTOR = 0.7
ORIGIN_COUNTRY_BONUS = 5.0


def normalize_weather(code: str) -> str:
    """Map a raw condition code (e.g. ``drizzle``) to its weather category."""
    key = (code or "").strip().lower()
    return WEATHER_CONDITION_MAP.get(key, key)


def _category_score(item: Item) -> float:
    priority = CATEGORY_PRIORITY.get(item.category_key, DEFAULT_PRIORITY)
    return priority / 100 * WEIGHTS["category"]


def _essential_score(item: Item, context: TripContext) -> float:
    score = 0.0
    if item.id in ESSENTIAL_ITEMS:
        score += WEIGHTS["essential"]
    if context.trip_type == "international" and item.id in INTERNATIONAL_ESSENTIAL_ITEMS:
        score += WEIGHTS["essential"]
    return score


def _activity_score(item: Item, context: TripContext) -> float:
    activities = item.attributes.activities
    if ANY in activities:
        return WEIGHTS["activity"] * ANY_ACTIVITY_FACTOR
    if not context.activities:
        return 0.0
    matches = len(context.activities & activities)
    return WEIGHTS["activity"] * matches / len(context.activities)


def _weather_score(item: Item, context: TripContext) -> float:
    conditions = item.attributes.weather_condition
    if ANY in conditions:
        return WEIGHTS["weather"] * ANY_WEATHER_FACTOR
    trip_weather = normalize_weather(context.weather_code)
    if trip_weather in {normalize_weather(c) for c in conditions}:
        return WEIGHTS["weather"]
    return 0.0


def _temperature_score(item: Item, context: TripContext) -> float:
    attrs = item.attributes
    if not attrs.has_temp_range:
        return 0.0
    if attrs.temp_min <= context.avg_temp <= attrs.temp_max:
        return WEIGHTS["temperature"]
    midpoint = (attrs.temp_min + attrs.temp_max) / 2
    distance = abs(context.avg_temp - midpoint)
    if distance <= TEMP_TOLERANCE:
        return WEIGHTS["temperature"] * (1 - distance / TEMP_TOLERANCE) * TEMP_PARTIAL_FACTOR
    return 0.0


def _trip_type_score(item: Item, context: TripContext) -> float:
    attrs = item.attributes
    if attrs.trip_type is None:
        return WEIGHTS["trip_type"] * UNTYPED_TRIP_FACTOR
    if attrs.trip_type != context.trip_type:
        return 0.0
    score = WEIGHTS["trip_type"]
    if context.trip_type == "domestic" and context.origin_country.upper() in attrs.origin_country:
        score += ORIGIN_COUNTRY_BONUS
    return score


def _duration_bonus(item: Item, context: TripContext) -> float:
    rule = DURATION_BONUSES.get(item.category_key)
    if rule is None:
        return 0.0
    min_days, bonus = rule
    return bonus if context.duration_days > min_days else 0.0


def score_item(item: Item, context: TripContext) -> float:
    """Compute the clamped 0-100 match score of *item* for *context*."""
    total = (
        _category_score(item)
        + _essential_score(item, context)
        + _activity_score(item, context)
        + _weather_score(item, context)
        + _temperature_score(item, context)
        + _trip_type_score(item, context)
        + _duration_bonus(item, context)
    )
    return max(0.0, min(100.0, total))


def score_items(catalog: Catalog, context: TripContext) -> list[ScoredItem]:
    """Score every catalog item, tagging each with its catalog position."""
    scored = [
        ScoredItem(item=item, score=score_item(item, context), position=catalog.position(item.id))
        for item in catalog.items
    ]
    logger.debug("Scored %d items", len(scored))
    return scored
