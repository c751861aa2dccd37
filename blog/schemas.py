from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# --- Comment ---

class CommentBase(BaseModel):
    content: str = Field(min_length=1)
    author_name: str = Field(min_length=1, max_length=150)


class CommentCreate(CommentBase):
    pass


class CommentResponse(CommentBase):
    id: int
    post_id: int
    created_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


# --- Post ---

class PostBase(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    content: str


class PostCreate(PostBase):
    pass


class PostResponse(PostBase):
    id: int
    created_at: datetime | None = None
    comments: list[CommentResponse] = []
