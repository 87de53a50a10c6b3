from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from .cache import get_checklist, store_checklist
from .catalog import Catalog, get_catalog
from .composer import compose
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .filtering import filter_items
from .limiting import cap_items
from .models import ChecklistGroup, TripContext
from .ranking import rank_items
from .scoring import score_items

logger = logging.getLogger(__name__)


def resolve_trip_type(origin_country: str, destination_country: str) -> str:
    """Domestic when both country codes match (case-insensitive)."""
    if origin_country.strip().upper() == destination_country.strip().upper():
        return "domestic"
    return "international"


def recommend(
    catalog: Catalog,
    context: TripContext,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ChecklistGroup]:
    """Run the full score -> filter -> cap -> rank -> compose pipeline.

    Pure with respect to its inputs: the catalog and static tables are only
    read, so independent requests may run concurrently.
    """
    logger.debug(
        "Recommending for trip_type=%s origin=%s activities=%s weather=%s temp=%s",
        context.trip_type, context.origin_country, sorted(context.activities),
        context.weather_code, context.avg_temp,
    )
    scored = score_items(catalog, context)
    filtered = filter_items(scored, context, config)
    capped = cap_items(filtered)
    ranked = rank_items(capped, context.trip_type, context.origin_country)
    groups = compose(ranked, context)
    logger.debug("Recommended %d items in %d groups", len(ranked), len(groups))
    return groups


def get_recommended_items(context: TripContext) -> list[ChecklistGroup]:
    """Serve a packing list for *context* through the response cache.

    Every call records a ``checklist`` analytics event.
    """
    start_time = time.time()
    groups = get_checklist(context)
    cache_hit = groups is not None
    if not cache_hit:
        groups = recommend(get_catalog(), context)
        store_checklist(context, groups)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("checklist", {
        "destination": context.destination,
        "trip_type": context.trip_type,
        "origin_country": context.origin_country,
        "activities": sorted(context.activities),
        "lang": context.lang,
        "duration_days": context.duration_days,
        "items_returned": sum(len(g.items) for g in groups),
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })
    return groups
