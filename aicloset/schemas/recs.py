from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field

from aicloset.llm.types import Occasion, Weather
from aicloset.recs.types import Outfit, Preferences, WardrobeItem

RequestedOccasion = Union[Occasion, Literal["All Styles"]]


class ItemIn(BaseModel):
    id: str
    category: str = ""
    color: str = ""
    styles: List[str] = Field(default_factory=list)
    style: Optional[str] = None
    weather: List[str] = Field(default_factory=list)
    name: str = ""
    tags: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None

    def to_item(self) -> WardrobeItem:
        return WardrobeItem.from_dict(self.model_dump())


class PreferencesIn(BaseModel):
    weather: Weather
    occasion: RequestedOccasion
    favorite_color: Optional[str] = None
    penalized_ids: Optional[List[str]] = None

    def to_preferences(self, fallback_penalized: frozenset[str] = frozenset()) -> Preferences:
        penalized = frozenset(self.penalized_ids) if self.penalized_ids is not None else fallback_penalized
        return Preferences(
            weather=self.weather,
            occasion=self.occasion,
            favorite_color=self.favorite_color,
            penalized_ids=penalized,
        )


class RecommendIn(BaseModel):
    user_id: str = "me"
    items: List[ItemIn]
    preferences: PreferencesIn


class PieceOut(BaseModel):
    id: str
    name: str = ""
    category: str = ""
    color: str = ""
    image_url: Optional[str] = None

    @classmethod
    def from_item(cls, item: Optional[WardrobeItem]) -> Optional["PieceOut"]:
        if item is None:
            return None
        return cls(id=item.id, name=item.name, category=item.category, color=item.color, image_url=item.image_url)


class OutfitOut(BaseModel):
    type: Literal["separates", "dress"]
    top: Optional[PieceOut] = None
    bottom: Optional[PieceOut] = None
    dress: Optional[PieceOut] = None
    footwear: PieceOut
    outerwear: Optional[PieceOut] = None
    accessory: Optional[PieceOut] = None
    rule_score: float
    ml_score: Optional[float] = None
    score: float
    features: List[float] = Field(default_factory=list)
    fingerprint: str

    @classmethod
    def from_outfit(cls, o: Outfit) -> "OutfitOut":
        return cls(
            type=o.kind,
            top=PieceOut.from_item(o.top),
            bottom=PieceOut.from_item(o.bottom),
            dress=PieceOut.from_item(o.dress),
            footwear=PieceOut.from_item(o.footwear),
            outerwear=PieceOut.from_item(o.outerwear),
            accessory=PieceOut.from_item(o.accessory),
            rule_score=o.rule_score,
            ml_score=o.ml_score,
            score=o.score,
            features=list(o.features),
            fingerprint=o.full_id,
        )


class RecommendOut(BaseModel):
    outfits: List[OutfitOut]
    primary: Optional[OutfitOut] = None
