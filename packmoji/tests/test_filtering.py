from packmoji.recommendations.config import EngineConfig
from packmoji.recommendations.filtering import (
    category_threshold,
    excluded_documents,
    filter_items,
)


def _ids(scored_items):
    return [s.item.id for s in scored_items]


def test_international_trip_excludes_domestic_id_cards():
    assert excluded_documents("international", "CN") == {"id_card_cn", "id_card_us"}
    assert excluded_documents("international", "FR") == {"id_card_cn", "id_card_us"}


def test_domestic_trip_excludes_passport_and_other_card():
    assert excluded_documents("domestic", "CN") == {"passport", "id_card_us"}
    assert excluded_documents("domestic", "us") == {"passport", "id_card_cn"}


def test_domestic_trip_from_other_country_keeps_both_cards():
    assert excluded_documents("domestic", "JP") == {"passport"}


def test_threshold_base_values_and_defaults():
    assert category_threshold("Clothing/Accessories", frozenset()) == 35
    assert category_threshold("Comfort", frozenset()) == 20
    assert category_threshold("Mystery", frozenset()) == 25


def test_threshold_lowered_by_selected_activities():
    assert category_threshold("Clothing/Accessories", frozenset({"activity_camping"})) == 25
    assert category_threshold(
        "Clothing/Accessories", frozenset({"activity_camping", "activity_hiking"}),
    ) == 20
    assert category_threshold("Business", frozenset({"activity_business"})) == 20
    # an activity without an entry for the category leaves it alone
    assert category_threshold("Business", frozenset({"activity_beach"})) == 35


def test_threshold_never_drops_below_floor():
    assert category_threshold(
        "Food & Snacks", frozenset({"activity_camping", "activity_hiking"}),
    ) == 10
    strict = EngineConfig(threshold_floor=25.0)
    assert category_threshold("Food & Snacks", frozenset({"activity_camping"}), strict) == 25


def test_excluded_document_dropped_regardless_of_score(make_item, make_scored, make_context):
    passport = make_scored(make_item("passport", category="Essentials"), 99.0)
    ctx = make_context(trip_type="domestic", origin_country="CN")
    assert filter_items([passport], ctx) == []


def test_items_below_threshold_are_dropped(make_item, make_scored, make_context):
    low = make_scored(make_item("scarf", category="Clothing/Accessories"), 34.9)
    edge = make_scored(make_item("jeans", category="Clothing/Accessories"), 35.0, position=1)
    kept = filter_items([low, edge], make_context())
    assert _ids(kept) == ["jeans"]


def test_strict_trip_type_rule(make_item, make_scored, make_context):
    adapter = make_scored(make_item("adapter", category="Electronics", trip_type="international"), 90.0)
    card = make_scored(make_item("card", category="Electronics", trip_type="domestic"), 90.0, position=1)
    domestic = make_context(trip_type="domestic", origin_country="JP")
    assert _ids(filter_items([adapter, card], domestic)) == ["card"]
    abroad = make_context(trip_type="international")
    assert _ids(filter_items([adapter, card], abroad)) == ["adapter"]


def test_unrelated_activity_item_needs_buffer(make_item, make_scored, make_context):
    ctx = make_context(activities={"activity_beach"})
    tent = make_item("tent", category="Camping Gear", activities=("activity_camping",))
    # Camping Gear threshold is 30; the item must clear it by 15
    assert filter_items([make_scored(tent, 44.0)], ctx) == []
    assert _ids(filter_items([make_scored(tent, 45.0)], ctx)) == ["tent"]


def test_matching_activity_item_needs_only_threshold(make_item, make_scored, make_context):
    ctx = make_context(activities={"activity_camping"})
    tent = make_item("tent", category="Camping Gear", activities=("activity_camping",))
    # threshold lowered to 20 by camping
    assert _ids(filter_items([make_scored(tent, 21.0)], ctx)) == ["tent"]


def test_any_activity_item_skips_relevance_rule(make_item, make_scored, make_context):
    ctx = make_context(activities={"activity_beach"})
    towel = make_item("towel", category="Miscellaneous")
    assert _ids(filter_items([make_scored(towel, 21.0)], ctx)) == ["towel"]


def test_filter_preserves_input_order(make_item, make_scored, make_context):
    items = [
        make_scored(make_item(f"thing_{i}"), 50.0 + i, position=i)
        for i in range(5)
    ]
    assert _ids(filter_items(items, make_context())) == [f"thing_{i}" for i in range(5)]
