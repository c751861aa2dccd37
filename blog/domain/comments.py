"""
Comment collection scoped to a single post.

``Comments`` is a query object, not a list: it remembers only the
``post_id`` it is scoped to and issues a fresh ``SELECT`` every time it is
traversed.  Results are yielded in whatever order the store returns them.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog import models
from blog.domain import iteration

logger = logging.getLogger(__name__)


class Comment:
    """Read-only view over one comment record."""

    def __init__(self, record: models.Comment) -> None:
        self._record = record

    @property
    def id(self) -> int:
        return self._record.id

    @property
    def post_id(self) -> int:
        return self._record.post_id

    @property
    def author_name(self) -> str:
        return self._record.author_name

    @property
    def content(self) -> str:
        return self._record.content

    @property
    def created_at(self) -> datetime | None:
        return self._record.created_at

    def __repr__(self) -> str:
        return f"Comment(id={self.id!r}, post_id={self.post_id!r})"


class Comments:
    """
    Lazily-queried comments for ``post_id``.

    Usage::

        async for comment in Comments(post_id=7, db=db):
            ...

    Each ``async for`` re-runs the query, so two traversals may disagree
    if rows were written in between.  An empty scope yields nothing.
    """

    def __init__(self, *, post_id: int, db: AsyncSession) -> None:
        self._post_id = post_id
        self._db = db

    @property
    def post_id(self) -> int:
        return self._post_id

    async def __aiter__(self) -> AsyncIterator[Comment]:
        logger.debug("Querying comments for post_id=%s", self._post_id)
        result = await self._db.execute(
            select(models.Comment).where(models.Comment.post_id == self._post_id)
        )
        for record in result.scalars():
            yield Comment(record)

    async def to_list(self) -> list[Comment]:
        return await iteration.to_list(self)

    async def count(self) -> int:
        return await iteration.count(self)

    def __repr__(self) -> str:
        return f"Comments(post_id={self._post_id!r})"
