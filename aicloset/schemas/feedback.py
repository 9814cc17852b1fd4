from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, model_validator

from aicloset.services.feedback import FeedbackRecord


class FeedbackIn(BaseModel):
    user_id: str = "me"
    outfit_type: Literal["separates", "dress"]
    top_id: Optional[str] = None
    bottom_id: Optional[str] = None
    dress_id: Optional[str] = None
    footwear_id: str
    outerwear_id: Optional[str] = None
    requested_style: Optional[str] = None
    weather: Optional[str] = None
    liked: bool
    features: List[float] = Field(default_factory=list)
    rule_score: Optional[float] = None
    ml_score: Optional[float] = None
    final_score: Optional[float] = None
    constraints_met: bool = True

    @model_validator(mode="after")
    def _pieces_match_type(self):
        if self.outfit_type == "dress" and not self.dress_id:
            raise ValueError("dress_id is required for dress outfits")
        if self.outfit_type == "separates" and not (self.top_id and self.bottom_id):
            raise ValueError("top_id and bottom_id are required for separates")
        return self

    def to_record(self) -> FeedbackRecord:
        return FeedbackRecord(**self.model_dump(exclude={"user_id"}))


class FeedbackOut(BaseModel):
    outfit_type: str
    liked: bool
    outerwear_id: Optional[str] = None
    created_at: datetime


class FeedbackMetricsOut(BaseModel):
    total_feedback: int
    total_likes: int
    like_rate: float
    constraint_satisfaction: float
