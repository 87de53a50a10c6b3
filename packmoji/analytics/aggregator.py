from __future__ import annotations

from collections import Counter
from typing import Any


def _rate(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    requests = [e for e in events if e["type"] == "checklist"]
    total = len(requests)

    # Average response time
    times = [r["response_time_ms"] for r in requests if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top destinations
    dest_counter: Counter[str] = Counter()
    for r in requests:
        dest_counter[r.get("destination", "unknown")] += 1
    top_destinations = [{"name": n, "count": c} for n, c in dest_counter.most_common(10)]

    # Activity usage
    activity_counter: Counter[str] = Counter()
    for r in requests:
        for a in r.get("activities", []) or []:
            activity_counter[a] += 1
    activity_usage = dict(activity_counter.most_common())

    trip_types = Counter(r.get("trip_type", "unknown") for r in requests)
    languages = Counter(r.get("lang", "unknown") for r in requests)

    items = [r["items_returned"] for r in requests if "items_returned" in r]
    avg_items = round(sum(items) / len(items), 1) if items else 0.0

    cache_hits = sum(1 for r in requests if r.get("cache_hit"))

    return {
        "total_requests": total,
        "avg_response_time_ms": avg_time,
        "avg_items_returned": avg_items,
        "top_destinations": top_destinations,
        "activity_usage": activity_usage,
        "trip_type_split": {k: _rate(v, total) for k, v in trip_types.items()},
        "language_usage": dict(languages),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _rate(cache_hits, total),
        },
    }
