from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from boardgames.schemas import ensure_string


class CategoryCreateSchema(BaseModel):
    slug: Optional[str] = None
    description: Optional[str] = None

    @field_validator('slug', 'description', mode='before')
    def validate_strings(cls, value):
        return ensure_string(value)

class CategorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    description: str

class CategoryResponseSchema(BaseModel):
    category: CategorySchema

class CategoryListSchema(BaseModel):
    categories: List[CategorySchema]
