"""In-process TTL cache for generated checklists, keyed by trip context."""

from __future__ import annotations

import hashlib
import json
import threading
import time

from .config import DEFAULT_ENGINE_CONFIG
from .models import ChecklistGroup, TripContext

_entries: dict[str, tuple[float, list[ChecklistGroup]]] = {}
_stats = {"hits": 0, "misses": 0}
_lock = threading.Lock()


def _snapshot(groups: list[ChecklistGroup]) -> list[ChecklistGroup]:
    # callers own what they get back; the cache keeps its own deep copy
    return [group.model_copy(deep=True) for group in groups]


def context_key(context: TripContext) -> str:
    """Digest of every field that shapes a checklist. Activity order is ignored."""
    normalized = json.dumps(
        {
            "duration_days": context.duration_days,
            "avg_temp": context.avg_temp,
            "weather_code": context.weather_code,
            "activities": sorted(context.activities),
            "lang": context.lang,
            "trip_type": context.trip_type,
            "origin_country": context.origin_country,
            "destination": context.destination,
        },
        sort_keys=True,
        ensure_ascii=False,
    )
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:16]


def get_checklist(context: TripContext, ttl: int | None = None) -> list[ChecklistGroup] | None:
    """Return the cached checklist for *context*, or None when absent or expired."""
    if ttl is None:
        ttl = DEFAULT_ENGINE_CONFIG.cache_ttl
    key = context_key(context)
    with _lock:
        entry = _entries.get(key)
        if entry is not None and time.time() - entry[0] < ttl:
            _stats["hits"] += 1
            return _snapshot(entry[1])
        if entry is not None:
            del _entries[key]
        _stats["misses"] += 1
        return None


def store_checklist(
    context: TripContext,
    groups: list[ChecklistGroup],
    ttl: int | None = None,
) -> None:
    """Cache a private copy of *groups* and drop entries older than *ttl*."""
    if ttl is None:
        ttl = DEFAULT_ENGINE_CONFIG.cache_ttl
    now = time.time()
    with _lock:
        expired = [key for key, (created_at, _) in _entries.items() if now - created_at >= ttl]
        for key in expired:
            del _entries[key]
        _entries[context_key(context)] = (now, _snapshot(groups))


def get_cache_stats() -> dict:
    with _lock:
        hits, misses = _stats["hits"], _stats["misses"]
        size = len(_entries)
    total = hits + misses
    return {
        "size": size,
        "hits": hits,
        "misses": misses,
        "hit_rate": round(hits / total * 100, 1) if total else 0.0,
    }


def clear_cache() -> None:
    with _lock:
        _entries.clear()
        _stats["hits"] = 0
        _stats["misses"] = 0
