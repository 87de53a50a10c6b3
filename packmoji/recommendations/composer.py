from __future__ import annotations

import math
from typing import Mapping
from urllib.parse import quote

from .catalog import DataIntegrityError
from .models import ChecklistGroup, Item, ProcessedItem, ScoredItem, TripContext
from .tables import SUBCATEGORY_ORDER

FALLBACK_LANG = "en"

NOTE_TEMPLATES = {
    "en": "Search link: {url}",
    "zh": "搜索链接：{url}",
}

# Characters encodeURIComponent leaves untouched besides alphanumerics and "_.-"
_URI_COMPONENT_SAFE = "!~*'()"


def _primary_lang(lang: str) -> str:
    return (lang or FALLBACK_LANG).replace("_", "-").split("-")[0].lower()


def localize(values: Mapping[str, str], lang: str, item_id: str, field: str) -> str:
    """Resolve *values* to *lang*, then its primary subtag, then English."""
    for key in (lang, _primary_lang(lang), FALLBACK_LANG):
        text = values.get(key)
        if text:
            return text
    raise DataIntegrityError(item_id, f"no {lang!r} or English {field}")


def compute_quantity(item: Item, duration_days: int) -> int:
    logic = item.quantity_logic
    if logic.type == "per_day":
        # round() keeps float noise such as 0.1 * 30 from adding an extra unit
        return math.ceil(round(duration_days * logic.value, 6))
    return int(logic.value)


def render_url(template: str, destination: str) -> str:
    return template.replace("{destination}", quote(destination, safe=_URI_COMPONENT_SAFE))


def search_note(url: str, lang: str) -> str:
    template = NOTE_TEMPLATES.get(_primary_lang(lang), NOTE_TEMPLATES[FALLBACK_LANG])
    return template.format(url=url)


def process_item(scored: ScoredItem, context: TripContext) -> ProcessedItem:
    item = scored.item
    url = note = None
    if item.url:
        url = render_url(item.url, context.destination)
        note = search_note(url, context.lang)
    return ProcessedItem(
        id=item.id,
        name=localize(item.name, context.lang, item.id, "name"),
        emoji=item.emoji,
        category=localize(item.category, context.lang, item.id, "category"),
        quantity=compute_quantity(item, context.duration_days),
        note=note,
        url=url,
        score=round(scored.score, 4),
    )


def order_within_category(category_key: str, items: list[ProcessedItem]) -> list[ProcessedItem]:
    """Re-order a category's items bucket by bucket using its sub-category table.

    Items the table does not list follow in their incoming order. Categories
    without a table are returned unchanged.
    """
    buckets = SUBCATEGORY_ORDER.get(category_key)
    if not buckets:
        return items

    by_id = {p.id: p for p in items}
    ordered: list[ProcessedItem] = []
    placed: set[str] = set()
    for _name, ids in buckets:
        for item_id in ids:
            if item_id in by_id and item_id not in placed:
                ordered.append(by_id[item_id])
                placed.add(item_id)
    ordered.extend(p for p in items if p.id not in placed)
    return ordered


def compose(ranked: list[ScoredItem], context: TripContext) -> list[ChecklistGroup]:
    """Localise, quantify and group ranked items into category buckets."""
    groups: dict[str, list[ProcessedItem]] = {}
    group_keys: dict[str, str] = {}
    for scored in ranked:
        processed = process_item(scored, context)
        groups.setdefault(processed.category, []).append(processed)
        group_keys.setdefault(processed.category, scored.item.category_key)

    return [
        ChecklistGroup(group=name, items=order_within_category(group_keys[name], items))
        for name, items in groups.items()
    ]
