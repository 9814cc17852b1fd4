import random

from aicloset.recs.filters import (
    apply_snowy_bottoms_filter,
    filter_items_strict,
    partition_items,
    validate_wardrobe,
)
from aicloset.recs.types import FailureReason, Partition, Preferences
from tests.fixtures import item, minimal_wardrobe


def test_style_must_match_exactly():
    items = [item("a", "Top", styles=("Casual",)), item("b", "Top", styles=("Formal",))]
    kept = filter_items_strict(items, Preferences(weather="Sunny", occasion="Formal"))
    assert [i.id for i in kept] == ["b"]


def test_style_match_ignores_case_and_slash_spacing():
    items = [item("a", "Dress", styles=("party/dressy",))]
    kept = filter_items_strict(items, Preferences(weather="Sunny", occasion="Party / Dressy"))
    assert [i.id for i in kept] == ["a"]


def test_legacy_single_style_is_consulted():
    items = [item("a", "Top", styles=(), style="Formal")]
    kept = filter_items_strict(items, Preferences(weather="Sunny", occasion="Formal"))
    assert len(kept) == 1


def test_wildcard_request_and_wildcard_item():
    items = [item("a", "Top", styles=("Casual",)), item("b", "Top", styles=("All Styles",))]
    assert len(filter_items_strict(items, Preferences(weather="Sunny", occasion="All Styles"))) == 2
    assert [i.id for i in filter_items_strict(items, Preferences(weather="Sunny", occasion="Formal"))] == ["b"]


def test_untagged_weather_matches_any_weather():
    items = [item("a", "Top"), item("b", "Top", weather=("Sunny",)), item("c", "Top", weather=("Cold",))]
    kept = filter_items_strict(items, Preferences(weather="Cold", occasion="Casual"))
    assert [i.id for i in kept] == ["a", "c"]


def test_umbrella_survives_rain_regardless_of_tags():
    umbrella = item("u", "Accessory", styles=("Formal",), weather=("Sunny",), name="Compact Umbrella")
    prefs = Preferences(weather="Rainy", occasion="Casual")
    assert filter_items_strict([umbrella], prefs) == [umbrella]
    assert filter_items_strict([umbrella], Preferences(weather="Sunny", occasion="Casual")) == []


def test_filter_is_idempotent():
    items = minimal_wardrobe() + [item("x", "Top", styles=("Formal",)), item("y", "Top", weather=("Cold",))]
    prefs = Preferences(weather="Sunny", occasion="Casual")
    once = filter_items_strict(items, prefs)
    assert filter_items_strict(once, prefs) == once


def test_partition_slots():
    items = [
        item("t", "Top"),
        item("b", "Bottom"),
        item("sk", "Shorts/Skirts"),
        item("d", "Dress"),
        item("f", "Footwear"),
        item("o", "Outerwear"),
        item("j", "Denim Jacket"),
        item("a", "Accessory"),
        item("x", "Swimwear"),
    ]
    part = partition_items(items, random.Random(1))
    assert part.counts() == {
        "tops": 1,
        "bottoms": 2,
        "dresses": 1,
        "footwear": 1,
        "outerwear": 2,
        "accessories": 1,
    }


def test_partition_shuffle_is_seeded():
    items = [item(f"t{i}", "Top") for i in range(10)]
    a = partition_items(items, random.Random(3))
    b = partition_items(items, random.Random(3))
    assert [i.id for i in a.tops] == [i.id for i in b.tops]
    assert sorted(i.id for i in a.tops) == sorted(i.id for i in items)


def _bottoms(long: int, short: int) -> Partition:
    part = Partition()
    part.bottoms = [item(f"l{i}", "Bottom") for i in range(long)]
    part.bottoms += [item(f"s{i}", "Shorts/Skirts") for i in range(short)]
    return part


def test_snowy_filter_removes_shorts_when_enough_long_bottoms():
    part = _bottoms(3, 2)
    fallback = apply_snowy_bottoms_filter(part, Preferences(weather="Snowy", occasion="Casual"))
    assert fallback is False
    assert [b.id for b in part.bottoms] == ["l0", "l1", "l2"]


def test_snowy_filter_keeps_shorts_when_too_few_long_bottoms():
    part = _bottoms(2, 2)
    fallback = apply_snowy_bottoms_filter(part, Preferences(weather="Snowy", occasion="Casual"))
    assert fallback is True
    assert len(part.bottoms) == 4


def test_snowy_filter_only_in_snow():
    part = _bottoms(3, 2)
    assert apply_snowy_bottoms_filter(part, Preferences(weather="Cold", occasion="Casual")) is False
    assert len(part.bottoms) == 5


def test_validate_requires_footwear():
    part = Partition(tops=[item("t", "Top")], bottoms=[item("b", "Bottom")])
    check = validate_wardrobe(part)
    assert not check.valid
    assert check.reason == FailureReason.NO_FOOTWEAR


def test_validate_requires_base_garments():
    part = Partition(tops=[item("t", "Top")], footwear=[item("f", "Footwear")])
    check = validate_wardrobe(part)
    assert check.reason == FailureReason.NO_BASE_GARMENTS


def test_validate_dress_only_is_enough():
    part = Partition(dresses=[item("d", "Dress")], footwear=[item("f", "Footwear")])
    assert validate_wardrobe(part).valid
