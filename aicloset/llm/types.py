from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Category = Literal["Top", "Bottom", "Dress", "Shorts/Skirts", "Footwear", "Outerwear", "Accessory"]
Occasion = Literal["Casual", "Smart Casual", "Formal", "Party / Dressy", "Sporty / Athleisure", "Streetwear"]
Weather = Literal["Sunny", "Rainy", "Cold", "Warm", "Snowy"]
Source = Literal["openai", "heuristic"]


class PredictRequest(BaseModel):
    image_url: Optional[str] = None
    image_b64: Optional[str] = None
    filename: Optional[str] = None
    name_hint: Optional[str] = None
    category_hint: Optional[str] = None


class ItemAttributes(BaseModel):
    name: str = ""
    category: Optional[Category] = None
    color: str = ""
    styles: List[Occasion] = Field(default_factory=list)
    weather: List[Weather] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    reasoning_tags: List[str] = Field(default_factory=list)
    source: Source = "heuristic"
