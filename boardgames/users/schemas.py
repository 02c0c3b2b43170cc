from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class UserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    name: str
    avatar_url: Optional[str]

class UserResponseSchema(BaseModel):
    user: UserSchema

class UserListSchema(BaseModel):
    users: List[UserSchema]
