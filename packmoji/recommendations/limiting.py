from __future__ import annotations

import logging

from .models import ScoredItem
from .tables import DEFAULT_CAP, MAX_ITEMS_PER_CATEGORY

logger = logging.getLogger(__name__)


def category_cap(category: str) -> int:
    return MAX_ITEMS_PER_CATEGORY.get(category, DEFAULT_CAP)


def cap_items(filtered: list[ScoredItem]) -> list[ScoredItem]:
    """Deduplicate and truncate each category to its configured maximum.

    Groups are ordered by category first encounter. Inside a group the items
    are re-sorted by catalog position before truncation, so an over-full
    category keeps its catalog-earliest items regardless of score.
    """
    groups: dict[str, list[ScoredItem]] = {}
    seen_ids: set[str] = set()
    for scored in filtered:
        if scored.item.id in seen_ids:
            continue
        seen_ids.add(scored.item.id)
        groups.setdefault(scored.item.category_key, []).append(scored)

    capped: list[ScoredItem] = []
    for category, members in groups.items():
        members = sorted(members, key=lambda s: s.position)
        limit = category_cap(category)
        if len(members) > limit:
            logger.debug(
                "Category %r capped at %d, dropping %s",
                category, limit, [s.item.id for s in members[limit:]],
            )
        capped.extend(members[:limit])
    return capped
