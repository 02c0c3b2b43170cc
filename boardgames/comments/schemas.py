from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from boardgames.schemas import ensure_string


class CommentCreateSchema(BaseModel):
    username: Optional[str] = None
    body: Optional[str] = None

    @field_validator('username', 'body', mode='before')
    def validate_strings(cls, value):
        return ensure_string(value)

class CommentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int
    body: str
    review_id: int
    author: str
    votes: int
    created_at: datetime

class CommentResponseSchema(BaseModel):
    comment: CommentSchema

class CommentListSchema(BaseModel):
    comments: List[CommentSchema]
