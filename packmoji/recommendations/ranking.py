from __future__ import annotations

from .models import ScoredItem
from .tables import (
    ALL_ID_CARDS,
    CRITICAL_DOCUMENTS,
    ESSENTIAL_ITEMS,
    ID_CARD_BY_COUNTRY,
    PASSPORT,
)


def highest_priority_documents(trip_type: str, origin_country: str) -> frozenset[str]:
    """The document(s) that lead the list for this trip-type / origin pair."""
    if trip_type == "international":
        return frozenset({PASSPORT})
    own_card = ID_CARD_BY_COUNTRY.get((origin_country or "").upper())
    if own_card is None:
        return ALL_ID_CARDS
    return frozenset({own_card})


def rank_items(
    capped: list[ScoredItem],
    trip_type: str,
    origin_country: str,
) -> list[ScoredItem]:
    """Order items: priority documents, critical documents, essentials,
    then descending score, with catalog position as the final tie-break."""
    priority_docs = highest_priority_documents(trip_type, origin_country)

    def sort_key(scored: ScoredItem) -> tuple:
        item_id = scored.item.id
        return (
            item_id not in priority_docs,
            item_id not in CRITICAL_DOCUMENTS,
            item_id not in ESSENTIAL_ITEMS,
            -scored.score,
            scored.position,
        )

    return sorted(capped, key=sort_key)
