from __future__ import annotations

import logging

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import ANY, ScoredItem, TripContext
from .tables import (
    ACTIVITY_THRESHOLD_ADJUSTMENTS,
    ALL_ID_CARDS,
    DEFAULT_THRESHOLD,
    ID_CARD_BY_COUNTRY,
    PASSPORT,
    SCORE_THRESHOLDS,
)

logger = logging.getLogger(__name__)


def excluded_documents(trip_type: str, origin_country: str) -> frozenset[str]:
    """Return document ids that must never appear for this trip.

    International trips drop every domestic ID card. Domestic trips drop the
    passport and the ID cards of other countries; an origin without its own
    card keeps both cards.
    """
    if trip_type == "international":
        return ALL_ID_CARDS
    own_card = ID_CARD_BY_COUNTRY.get((origin_country or "").upper())
    if own_card is None:
        return frozenset({PASSPORT})
    return frozenset({PASSPORT}) | (ALL_ID_CARDS - {own_card})


def category_threshold(
    category: str,
    activities: frozenset[str],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> float:
    """Base threshold for *category* lowered by the selected activities."""
    threshold = float(SCORE_THRESHOLDS.get(category, DEFAULT_THRESHOLD))
    for activity in activities:
        adjustments = ACTIVITY_THRESHOLD_ADJUSTMENTS.get(activity)
        if adjustments:
            threshold += adjustments.get(category, 0)
    return max(config.threshold_floor, threshold)


def _drop_reason(
    scored: ScoredItem,
    context: TripContext,
    excluded: frozenset[str],
    config: EngineConfig,
) -> str | None:
    item = scored.item
    attrs = item.attributes

    if item.id in excluded:
        return "excluded document"

    threshold = category_threshold(item.category_key, context.activities, config)
    if scored.score < threshold:
        return f"score {scored.score:.2f} below threshold {threshold:.0f}"

    if attrs.trip_type is not None and attrs.trip_type != context.trip_type:
        return f"trip type mismatch ({attrs.trip_type} vs {context.trip_type})"

    if ANY not in attrs.activities and not (attrs.activities & context.activities):
        if scored.score - threshold < config.relevance_buffer:
            return "no matching activity"

    return None


def filter_items(
    scored_items: list[ScoredItem],
    context: TripContext,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredItem]:
    """Keep the items that pass every exclusion, threshold and relevance rule."""
    excluded = excluded_documents(context.trip_type, context.origin_country)
    kept: list[ScoredItem] = []
    for scored in scored_items:
        reason = _drop_reason(scored, context, excluded, config)
        if reason is None:
            kept.append(scored)
        else:
            logger.debug("Dropped %s: %s", scored.item.id, reason)
    logger.debug("Filter kept %d of %d items", len(kept), len(scored_items))
    return kept
