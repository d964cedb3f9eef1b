"""
Item-endpoint lookups.

Each ``get_<resource>_or_404`` dependency loads the record named in the path
and hands it to the verb handler as an argument, or ends the request with
the resource's 404 before the handler runs.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.database import get_db
from blogful.errors import ApiError
from blogful.services import article_service, comment_service, user_service

# Upper bound of a PostgreSQL INTEGER primary key.
MAX_ID = 2**31 - 1


def parse_id(raw: str) -> int | None:
    """
    Return *raw* as a row id, or None when it cannot name a stored row
    (not a plain positive integer, or outside the INTEGER column range).
    """
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    if value < 1 or value > MAX_ID:
        return None
    return value


async def get_article_or_404(article_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    record_id = parse_id(article_id)
    article = None if record_id is None else await article_service.get_by_id(db, record_id)
    if article is None:
        raise ApiError(404, "Article doesn't exist")
    return article


async def get_user_or_404(user_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    record_id = parse_id(user_id)
    user = None if record_id is None else await user_service.get_by_id(db, record_id)
    if user is None:
        raise ApiError(404, "User doesn't exist")
    return user


async def get_comment_or_404(comment_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    record_id = parse_id(comment_id)
    comment = None if record_id is None else await comment_service.get_by_id(db, record_id)
    if comment is None:
        raise ApiError(404, "Comment doesn't exist")
    return comment
