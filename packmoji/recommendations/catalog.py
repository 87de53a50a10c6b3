from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .config import DEFAULT_ENGINE_CONFIG
from .models import ANY, Item, ItemAttributes, QuantityLogic

logger = logging.getLogger(__name__)

QUANTITY_TYPES = ("fixed", "per_day")


class DataIntegrityError(Exception):
    """A catalog entry is malformed; ``item_id`` names the offending item."""

    def __init__(self, item_id: str, message: str) -> None:
        super().__init__(f"{item_id}: {message}")
        self.item_id = item_id


@dataclass(frozen=True)
class Catalog:
    items: tuple[Item, ...]
    positions: Mapping[str, int]

    def __len__(self) -> int:
        return len(self.items)

    def position(self, item_id: str) -> int:
        return self.positions[item_id]

    def activity_tags(self) -> list[str]:
        tags = {a for item in self.items for a in item.attributes.activities}
        tags.discard(ANY)
        return sorted(tags)

    def categories(self) -> list[str]:
        seen: dict[str, None] = {}
        for item in self.items:
            seen.setdefault(item.category_key, None)
        return list(seen)


def _tag_set(values: Any, default: frozenset[str]) -> frozenset[str]:
    if values is None:
        return default
    if isinstance(values, str):
        values = [values]
    return frozenset(str(v) for v in values)


def _parse_item(raw: dict[str, Any]) -> Item:
    item_id = raw.get("id")
    if not item_id:
        raise DataIntegrityError("<unknown>", "item has no id")

    attrs = raw.get("attributes") or {}
    attributes = ItemAttributes(
        activities=_tag_set(attrs.get("activities"), frozenset({ANY})),
        weather_condition=_tag_set(attrs.get("weather_condition"), frozenset({ANY})),
        temp_min=attrs.get("temp_min"),
        temp_max=attrs.get("temp_max"),
        trip_type=attrs.get("trip_type"),
        origin_country=frozenset(c.upper() for c in attrs.get("origin_country") or []),
    )

    logic = raw.get("quantity_logic") or {"type": "fixed", "value": 1}
    if logic.get("type") not in QUANTITY_TYPES:
        raise DataIntegrityError(item_id, f"unknown quantity_logic type {logic.get('type')!r}")
    try:
        value = float(logic.get("value", 1))
    except (TypeError, ValueError):
        raise DataIntegrityError(item_id, "quantity_logic value is not numeric") from None

    return Item(
        id=item_id,
        name=MappingProxyType(dict(raw.get("name") or {})),
        category=MappingProxyType(dict(raw.get("category") or {})),
        emoji=raw.get("emoji", ""),
        attributes=attributes,
        quantity_logic=QuantityLogic(type=logic["type"], value=value),
        url=raw.get("url"),
    )


def build_catalog(records: list[dict[str, Any]]) -> Catalog:
    """Parse raw item records into an immutable catalog.

    Each item gets a stable integer position in file order; it is only used
    for deterministic tie-breaks. Repeated ids keep the first occurrence.
    """
    items: list[Item] = []
    positions: dict[str, int] = {}
    for index, raw in enumerate(records):
        item = _parse_item(raw)
        if item.id in positions:
            logger.warning("Duplicate catalog id %r at index %d ignored", item.id, index)
            continue
        positions[item.id] = len(items)
        items.append(item)
    return Catalog(items=tuple(items), positions=MappingProxyType(positions))


def load_catalog(path: Path) -> Catalog:
    with open(path, encoding="utf-8") as fh:
        records = json.load(fh)
    catalog = build_catalog(records)
    logger.info("Loaded %d catalog items from %s", len(catalog), path)
    return catalog


_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(DEFAULT_ENGINE_CONFIG.catalog_path)
    return _catalog
