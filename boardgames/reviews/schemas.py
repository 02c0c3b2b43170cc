from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from boardgames.schemas import ensure_string


class ReviewCreateSchema(BaseModel):
    owner: Optional[str] = None
    title: Optional[str] = None
    review_body: Optional[str] = None
    designer: Optional[str] = None
    category: Optional[str] = None
    review_img_url: Optional[str] = None

    @field_validator('*', mode='before')
    def validate_strings(cls, value):
        return ensure_string(value)

class ReviewSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    review_id: int
    owner: str
    title: str
    category: str
    designer: str
    review_img_url: str
    votes: int
    created_at: datetime
    comment_count: int

class ReviewSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    review_id: int
    owner: str
    title: str
    review_body: str
    designer: str
    category: str
    review_img_url: str
    votes: int
    created_at: datetime

class ReviewDetailSchema(ReviewSchema):
    comment_count: int

class ReviewResponseSchema(BaseModel):
    review: ReviewSchema

class ReviewDetailResponseSchema(BaseModel):
    review: ReviewDetailSchema

class ReviewListSchema(BaseModel):
    total_count: int
    page: int
    reviews: List[ReviewSummarySchema]
