"""
Comment service: append-only comment creation for a Post.

Comments cannot be edited or deleted through the API.  The parent post is
looked up through ``Post.exists()`` before inserting, so a missing post is
reported as None instead of surfacing a foreign-key error from the store.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blog import models
from blog.domain import Comment, Post
from blog.presenters import CommentPresenter
from blog.schemas import CommentCreate

logger = logging.getLogger(__name__)


async def add_comment(
    db: AsyncSession,
    post_id: int,
    data: CommentCreate,
) -> dict | None:
    """
    Append a new comment to the post identified by *post_id*.

    Returns the presented comment dict on success, or None when the
    target post does not exist.
    """
    if not await Post(id=post_id, db=db).exists():
        return None

    record = models.Comment(
        content=data.content,
        author_name=data.author_name,
        post_id=post_id,
    )
    db.add(record)
    await db.flush()
    await db.refresh(record)
    logger.info("Added comment id=%s to post id=%s", record.id, post_id)

    return CommentPresenter(Comment(record)).as_json()
