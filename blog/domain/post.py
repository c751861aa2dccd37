from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog import models
from blog.domain.comments import Comments

logger = logging.getLogger(__name__)


class Post:
    """
    Identity wrapper around a persisted post.

    Constructing a ``Post`` never touches the database: ``id`` is whatever
    the caller passed in, whether or not a row exists.  The backing record
    is loaded on the first call to ``model()`` and kept for the lifetime of
    the instance.
    """

    def __init__(self, *, id: int, db: AsyncSession) -> None:
        self._id = id
        self._db = db
        self._model: models.Post | None = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def comments(self) -> Comments:
        """A new ``Comments`` scope on every access; nothing is cached."""
        return Comments(post_id=self._id, db=self._db)

    async def model(self) -> models.Post | None:
        """
        Return the backing record, or None when no post has this id.

        A found record is memoized.  A miss is not, so a later call will
        look again.
        """
        if self._model is None:
            logger.debug("Resolving post id=%s", self._id)
            result = await self._db.execute(
                select(models.Post).where(models.Post.id == self._id)
            )
            self._model = result.scalar_one_or_none()
        return self._model

    async def exists(self) -> bool:
        return await self.model() is not None

    def __repr__(self) -> str:
        return f"Post(id={self._id!r})"
