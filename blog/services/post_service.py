"""
Post service: creation of Post records.

Reading a post is done with ``blog.domain.Post`` and rendered with
``PostPresenter``; this module only inserts rows and hands the new id back
to the same presenter so writes and reads share one JSON shape.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blog import models
from blog.domain import Post
from blog.presenters import PostPresenter
from blog.schemas import PostCreate

logger = logging.getLogger(__name__)


async def create_post(db: AsyncSession, data: PostCreate) -> dict:
    """Insert a post and return its presented JSON (with no comments yet)."""
    record = models.Post(title=data.title, content=data.content)
    db.add(record)
    await db.flush()
    await db.refresh(record)
    logger.info("Created post id=%s", record.id)

    return await PostPresenter(Post(id=record.id, db=db)).as_json()
