import random

from aicloset.recs.pipeline import recommend
from aicloset.recs.types import FailureReason, OutfitHistory, Preferences
from tests.fixtures import item, minimal_wardrobe, neutral_wardrobe, outerwear_pool, umbrellas

SUNNY_CASUAL = Preferences(weather="Sunny", occasion="Casual")


def test_no_footwear_fails():
    items = [i for i in minimal_wardrobe() if i.category != "Footwear"]
    result = recommend(items, SUNNY_CASUAL, rng=random.Random(1))
    assert not result.success
    assert result.reason == FailureReason.NO_FOOTWEAR
    assert result.message.startswith("Not enough items match your criteria (Sunny, Casual).")


def test_filtered_out_items_count_as_missing():
    items = minimal_wardrobe()
    result = recommend(items, Preferences(weather="Sunny", occasion="Formal"), rng=random.Random(1))
    assert result.reason == FailureReason.NO_FOOTWEAR


def test_no_base_garments_fails():
    items = [item("t1", "Top"), item("s1", "Footwear")]
    result = recommend(items, SUNNY_CASUAL, rng=random.Random(1))
    assert result.reason == FailureReason.NO_BASE_GARMENTS


def test_color_clash_leaves_no_outfits():
    items = [item("t1", "Top", "Red"), item("b1", "Bottom", "Red"), item("s1", "Footwear")]
    result = recommend(items, SUNNY_CASUAL, rng=random.Random(1))
    assert result.reason == FailureReason.NO_MATCHING_OUTFITS
    assert result.message == 'No outfits found for "Casual" in "Sunny" weather.'


def test_minimal_wardrobe_single_outfit():
    result = recommend(minimal_wardrobe(), SUNNY_CASUAL, rng=random.Random(1))
    assert result.success
    assert len(result.outfits) == 1
    assert result.primary.full_id == "t1-b1-none-s1"
    assert result.primary.rule_score == 13.0


def test_batch_is_diverse():
    result = recommend(neutral_wardrobe(), SUNNY_CASUAL, rng=random.Random(2))
    assert len(result.outfits) == 5
    assert len({o.full_id for o in result.outfits}) == 5
    # three tops: the strict pass covers all of them first
    assert len({o.key_item_id for o in result.outfits[:3]}) == 3


def test_same_seed_same_batch():
    a = recommend(neutral_wardrobe(), SUNNY_CASUAL, rng=random.Random(9))
    b = recommend(neutral_wardrobe(), SUNNY_CASUAL, rng=random.Random(9))
    assert [o.full_id for o in a.outfits] == [o.full_id for o in b.outfits]


def test_recent_outfits_not_repeated():
    first = recommend(neutral_wardrobe(), SUNNY_CASUAL, rng=random.Random(3))
    history = OutfitHistory(recent_full_outfit_ids=[o.full_id for o in first.outfits])
    second = recommend(neutral_wardrobe(), SUNNY_CASUAL, history, rng=random.Random(4))
    assert not {o.full_id for o in first.outfits} & {o.full_id for o in second.outfits}


def test_everything_recent_gives_empty_success():
    history = OutfitHistory(recent_full_outfit_ids=["t1-b1-none-s1"])
    result = recommend(minimal_wardrobe(), SUNNY_CASUAL, history, rng=random.Random(1))
    assert result.success
    assert result.outfits == []
    assert result.primary is None


def test_cold_outfits_wear_outerwear():
    cold = Preferences(weather="Cold", occasion="Casual")
    result = recommend(neutral_wardrobe() + outerwear_pool(6), cold, rng=random.Random(5))
    assert all(o.outerwear is not None for o in result.outfits)
    assert len({o.outerwear.id for o in result.outfits}) == len(result.outfits)


def test_rainy_outfits_carry_umbrella():
    rainy = Preferences(weather="Rainy", occasion="Casual")
    result = recommend(neutral_wardrobe() + umbrellas(1), rainy, rng=random.Random(6))
    assert result.outfits
    assert all(o.accessory.id == "u1" for o in result.outfits)


def test_snow_excludes_shorts_when_long_bottoms_exist():
    snowy = Preferences(weather="Snowy", occasion="Casual")
    items = neutral_wardrobe(bottoms=3) + [item("sk", "Shorts/Skirts")]
    result = recommend(items, snowy, rng=random.Random(7))
    assert all(o.bottom.id != "sk" for o in result.outfits)


def test_dress_only_wardrobe():
    items = [item("d1", "Dress", "Red", styles=("Formal",)), item("s1", "Footwear", styles=("Formal",))]
    result = recommend(items, Preferences(weather="Warm", occasion="Formal"), rng=random.Random(1))
    assert result.success
    assert result.primary.kind == "dress"
    assert result.primary.full_id == "d1-none-s1"
