"""
Presenters: the only place API JSON shapes are produced.

Each presenter wraps a domain object and renders it through the matching
pydantic response model, so the wire format stays fixed even if the
underlying records gain or rename columns.
"""
from __future__ import annotations

from blog.domain import Comment, Post
from blog.domain.iteration import map_items, to_list
from blog.schemas import CommentResponse, PostResponse


class CommentPresenter:
    def __init__(self, comment: Comment) -> None:
        self.comment = comment

    def as_json(self) -> dict:
        # from_attributes reads the wrapper's properties, never the record.
        return CommentResponse.model_validate(self.comment).model_dump(mode="json")


class PostPresenter:
    def __init__(self, post: Post) -> None:
        self.post = post

    async def as_json(self) -> dict | None:
        """
        Render the post with its comments, or return None when the post
        does not exist.
        """
        record = await self.post.model()
        if record is None:
            return None
        return PostResponse(
            id=self.post.id,
            title=record.title,
            content=record.content,
            created_at=record.created_at,
            comments=await present_comments(self.post),
        ).model_dump(mode="json")


async def present_comments(post: Post) -> list[dict]:
    """Render every comment currently stored for *post*."""
    return await to_list(
        map_items(post.comments, lambda c: CommentPresenter(c).as_json())
    )
