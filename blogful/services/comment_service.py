"""
Comment service: data access for the ``blogful_comments`` table.

A comment's article and author are fixed at creation; only the text and
the timestamp can change afterwards.  date_commented is assigned by the
database unless the client supplies one.
"""
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.models import Comment

logger = logging.getLogger(__name__)

INSERT_FIELDS = ("text", "article_id", "user_id", "date_commented")
UPDATE_FIELDS = ("text", "date_commented")


def _comment_to_dict(comment: Comment) -> dict:
    return {
        "id": comment.id,
        "text": comment.text,
        "date_commented": comment.date_commented.isoformat() if comment.date_commented else None,
        "article_id": comment.article_id,
        "user_id": comment.user_id,
    }


async def get_all_comments(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(Comment).order_by(Comment.id))
    return [_comment_to_dict(c) for c in result.scalars().all()]


async def get_by_id(db: AsyncSession, comment_id: int) -> dict | None:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    comment = result.scalar_one_or_none()
    if comment is None:
        return None
    return _comment_to_dict(comment)


async def insert_comment(db: AsyncSession, fields: dict) -> dict:
    """
    Insert a new comment and return it as stored.

    A None date_commented is left out of the INSERT so the column's server
    default applies.
    """
    values = {
        key: fields.get(key)
        for key in INSERT_FIELDS
        if not (key == "date_commented" and fields.get(key) is None)
    }
    comment = Comment(**values)
    db.add(comment)
    await db.flush()
    await db.refresh(comment)
    logger.info("Created comment id=%s on article id=%s", comment.id, comment.article_id)
    return _comment_to_dict(comment)


async def update_comment(db: AsyncSession, comment_id: int, fields: dict) -> None:
    values = {
        key: value
        for key, value in fields.items()
        if key in UPDATE_FIELDS and value is not None
    }
    if not values:
        return
    await db.execute(update(Comment).where(Comment.id == comment_id).values(**values))
    logger.info("Updated comment id=%s fields=%s", comment_id, sorted(values))


async def delete_comment(db: AsyncSession, comment_id: int) -> None:
    await db.execute(delete(Comment).where(Comment.id == comment_id))
    logger.info("Deleted comment id=%s", comment_id)
