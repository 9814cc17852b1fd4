from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional

OutfitKind = Literal["separates", "dress"]


def _as_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    try:
        return tuple(str(v) for v in value if v is not None)
    except TypeError:
        return ()


@dataclass(frozen=True)
class WardrobeItem:
    """Catalog item as seen by the recommender. Read-only."""

    id: str
    category: str = ""
    color: str = ""
    styles: tuple[str, ...] = ()
    style: Optional[str] = None  # deprecated single-style field, still consulted
    weather: tuple[str, ...] = ()
    name: str = ""
    tags: tuple[str, ...] = ()
    image_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WardrobeItem":
        return cls(
            id=str(data.get("id", "")),
            category=data.get("category") or "",
            color=data.get("color") or "",
            styles=_as_tuple(data.get("styles")),
            style=data.get("style") or None,
            weather=_as_tuple(data.get("weather")),
            name=data.get("name") or "",
            tags=_as_tuple(data.get("tags")),
            image_url=data.get("image_url"),
        )


@dataclass(frozen=True)
class Preferences:
    weather: str
    occasion: str
    favorite_color: Optional[str] = None
    penalized_ids: frozenset[str] = frozenset()

    @property
    def is_cold(self) -> bool:
        return self.weather in ("Cold", "Snowy")

    @property
    def is_hot(self) -> bool:
        return self.weather in ("Sunny", "Warm")

    @property
    def is_rainy(self) -> bool:
        return self.weather == "Rainy"


@dataclass
class Outfit:
    kind: OutfitKind
    footwear: WardrobeItem
    top: Optional[WardrobeItem] = None
    bottom: Optional[WardrobeItem] = None
    dress: Optional[WardrobeItem] = None
    outerwear: Optional[WardrobeItem] = None
    accessory: Optional[WardrobeItem] = None
    rule_score: float = 0.0
    ml_score: Optional[float] = None
    score: float = 0.0
    features: List[float] = field(default_factory=list)

    @classmethod
    def separates(cls, top: WardrobeItem, bottom: WardrobeItem, footwear: WardrobeItem) -> "Outfit":
        return cls(kind="separates", top=top, bottom=bottom, footwear=footwear)

    @classmethod
    def one_piece(cls, dress: WardrobeItem, footwear: WardrobeItem) -> "Outfit":
        return cls(kind="dress", dress=dress, footwear=footwear)

    @property
    def is_dress(self) -> bool:
        return self.kind == "dress"

    @property
    def key_item(self) -> WardrobeItem:
        return self.dress if self.is_dress else self.top

    @property
    def key_item_id(self) -> str:
        return self.key_item.id

    @property
    def base_id(self) -> str:
        if self.is_dress:
            return self.dress.id
        return f"{self.top.id}-{self.bottom.id}"

    @property
    def full_id(self) -> str:
        outer = self.outerwear.id if self.outerwear else "none"
        return f"{self.base_id}-{outer}-{self.footwear.id}"

    def pieces(self) -> List[WardrobeItem]:
        items = [self.footwear]
        if self.is_dress:
            items.append(self.dress)
        else:
            items.extend([self.top, self.bottom])
        if self.outerwear:
            items.append(self.outerwear)
        if self.accessory:
            items.append(self.accessory)
        return items


@dataclass
class OutfitHistory:
    """Bounded rotation history, newest first."""

    recent_full_outfit_ids: List[str] = field(default_factory=list)
    recent_key_item_ids: List[str] = field(default_factory=list)
    recent_outerwear_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "OutfitHistory":
        if not isinstance(data, Mapping):
            return cls()

        def _ids(key: str) -> List[str]:
            raw = data.get(key)
            if not isinstance(raw, list):
                return []
            return [str(x) for x in raw if isinstance(x, (str, int))]

        return cls(
            recent_full_outfit_ids=_ids("recentFullOutfitIds"),
            recent_key_item_ids=_ids("recentKeyItemIds"),
            recent_outerwear_ids=_ids("recentOuterwearIds"),
        )

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "recentFullOutfitIds": list(self.recent_full_outfit_ids),
            "recentKeyItemIds": list(self.recent_key_item_ids),
            "recentOuterwearIds": list(self.recent_outerwear_ids),
        }


@dataclass
class Partition:
    """Slot buckets handed from partitioning through to outerwear attachment."""

    tops: List[WardrobeItem] = field(default_factory=list)
    bottoms: List[WardrobeItem] = field(default_factory=list)
    dresses: List[WardrobeItem] = field(default_factory=list)
    footwear: List[WardrobeItem] = field(default_factory=list)
    outerwear: List[WardrobeItem] = field(default_factory=list)
    accessories: List[WardrobeItem] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return {
            "tops": len(self.tops),
            "bottoms": len(self.bottoms),
            "dresses": len(self.dresses),
            "footwear": len(self.footwear),
            "outerwear": len(self.outerwear),
            "accessories": len(self.accessories),
        }


class FailureReason(str, Enum):
    NO_FOOTWEAR = "no_footwear"
    NO_BASE_GARMENTS = "no_base_garments"
    NO_MATCHING_OUTFITS = "no_matching_outfits"


@dataclass(frozen=True)
class RecommendationResult:
    success: bool
    outfits: List[Outfit] = field(default_factory=list)
    reason: Optional[FailureReason] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, outfits: List[Outfit]) -> "RecommendationResult":
        return cls(success=True, outfits=list(outfits))

    @classmethod
    def fail(cls, reason: FailureReason, message: str) -> "RecommendationResult":
        return cls(success=False, reason=reason, message=message)

    @property
    def primary(self) -> Optional[Outfit]:
        return self.outfits[0] if self.outfits else None
