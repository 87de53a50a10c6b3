import pytest

from packmoji.recommendations.catalog import DataIntegrityError
from packmoji.recommendations.composer import (
    compose,
    compute_quantity,
    localize,
    order_within_category,
    process_item,
)

CLOTHING = {"en": "Clothing/Accessories", "zh": "衣物/饰品"}


def test_per_day_quantity_rounds_up(make_item):
    item = make_item("shorts", quantity=("per_day", 0.5))
    assert compute_quantity(item, 7) == 4


def test_per_day_quantity_ignores_float_noise(make_item):
    item = make_item("coffee", quantity=("per_day", 0.1))
    assert compute_quantity(item, 30) == 3


def test_fixed_quantity(make_item):
    item = make_item("bags", quantity=("fixed", 3))
    assert compute_quantity(item, 12) == 3


def test_url_is_encoded_and_copied_into_note(make_item, make_scored, make_context):
    item = make_item("visa_info", url="https://x?q={destination}")
    processed = process_item(make_scored(item, 50.0), make_context(destination="San José", lang="en"))
    assert processed.url == "https://x?q=San%20Jos%C3%A9"
    assert processed.note == "Search link: https://x?q=San%20Jos%C3%A9"


def test_chinese_note_and_names(make_item, make_scored, make_context):
    item = make_item(
        "visa_info",
        url="https://x?q={destination}",
        name={"en": "Check Visa Requirements", "zh": "查询签证要求"},
        category_names={"en": "Essentials", "zh": "必需品"},
    )
    processed = process_item(make_scored(item, 50.0), make_context(destination="东京", lang="zh-CN"))
    assert processed.name == "查询签证要求"
    assert processed.category == "必需品"
    assert processed.note == "搜索链接：https://x?q=%E4%B8%9C%E4%BA%AC"


def test_items_without_url_have_no_note(make_item, make_scored, make_context):
    processed = process_item(make_scored(make_item("towel"), 30.0), make_context())
    assert processed.url is None
    assert processed.note is None


def test_localize_falls_back_to_english():
    assert localize({"en": "Towel", "zh": "毛巾"}, "fr", "towel", "name") == "Towel"
    assert localize({"en": "Towel", "zh": "毛巾"}, "zh-Hans", "towel", "name") == "毛巾"


def test_localize_without_english_raises():
    with pytest.raises(DataIntegrityError) as excinfo:
        localize({"zh": "毛巾"}, "fr", "towel", "name")
    assert excinfo.value.item_id == "towel"
    assert "towel" in str(excinfo.value)


def test_compose_raises_for_item_missing_english(make_item, make_scored, make_context):
    broken = make_item("mystery_box", name={"de": "Kiste"})
    with pytest.raises(DataIntegrityError) as excinfo:
        compose([make_scored(broken, 50.0)], make_context(lang="en"))
    assert excinfo.value.item_id == "mystery_box"


def test_compose_groups_in_first_seen_order(make_item, make_scored, make_context):
    ranked = [
        make_scored(make_item("passport", category="Essentials"), 90.0, 0),
        make_scored(make_item("pillow", category="Comfort"), 30.0, 5),
        make_scored(make_item("cash", category="Essentials"), 60.0, 1),
    ]
    groups = compose(ranked, make_context())
    assert [g.group for g in groups] == ["Essentials", "Comfort"]
    assert [p.id for p in groups[0].items] == ["passport", "cash"]


def test_subcategory_table_reorders_clothing(make_item, make_scored, make_context):
    ranked = [
        make_scored(make_item("socks", category_names=CLOTHING), 55.0, 3),
        make_scored(make_item("mystery_cape", category_names=CLOTHING), 50.0, 9),
        make_scored(make_item("jeans", category_names=CLOTHING), 45.0, 2),
        make_scored(make_item("t_shirt", category_names=CLOTHING), 40.0, 0),
    ]
    groups = compose(ranked, make_context(lang="zh"))
    assert groups[0].group == "衣物/饰品"
    # tops, bottoms, underwear, then items the table does not know
    assert [p.id for p in groups[0].items] == ["t_shirt", "jeans", "socks", "mystery_cape"]


def test_category_without_table_keeps_ranked_order(make_item, make_scored, make_context):
    ranked = [
        make_scored(make_item("zeta"), 50.0, 2),
        make_scored(make_item("alpha"), 40.0, 1),
    ]
    groups = compose(ranked, make_context())
    assert [p.id for p in groups[0].items] == ["zeta", "alpha"]


def test_order_within_category_places_each_item_once(make_item, make_scored, make_context):
    processed = [
        process_item(make_scored(make_item(i, category="Miscellaneous"), 30.0), make_context())
        for i in ("books", "umbrella", "towel")
    ]
    ordered = order_within_category("Miscellaneous", processed)
    assert [p.id for p in ordered] == ["towel", "umbrella", "books"]
