from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.models.post import MAX_LENGTH

class PostBase(BaseModel):
    title: str = Field("", max_length=MAX_LENGTH)
    text: str = Field("", max_length=MAX_LENGTH)

class PostCreate(PostBase):
    pass

class PostUpdate(PostBase):
    title: Optional[str] = Field(None, max_length=MAX_LENGTH)
    text: Optional[str] = Field(None, max_length=MAX_LENGTH)

class ResponsePost(PostBase):
    id: int

    model_config = ConfigDict(from_attributes=True)

# One page of posts, ordered by id
class PostPage(BaseModel):
    posts: List[ResponsePost]
    page: int
    posts_per_page: int
    num_pages: int
