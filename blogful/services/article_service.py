"""
Article service: data access for the ``blogful_articles`` table.

Design notes
------------
- Functions take the request's ``AsyncSession`` first and return plain
  dicts (or None), never ORM instances, so routers cannot mutate persisted
  state except through this module.
- Records are returned exactly as stored.  Sanitisation is an output
  concern handled by the router.
- Service functions flush but do not commit; the transaction boundary is
  owned by the ``get_db`` dependency.
- ``update_article`` and ``delete_article`` do not report whether a row
  matched; callers look the article up first.
"""
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.models import Article

logger = logging.getLogger(__name__)

# Columns a client may write.  id and date_published belong to the store.
INSERT_FIELDS = ("title", "content", "style", "author")
UPDATE_FIELDS = ("title", "content", "style")


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _article_to_dict(article: Article) -> dict:
    """Serialise an Article ORM instance to a plain dict."""
    return {
        "id": article.id,
        "title": article.title,
        "content": article.content,
        "style": article.style,
        "author": article.author,
        "date_published": article.date_published.isoformat() if article.date_published else None,
    }


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_all_articles(db: AsyncSession) -> list[dict]:
    """Return every article in insertion (id) order."""
    result = await db.execute(select(Article).order_by(Article.id))
    return [_article_to_dict(a) for a in result.scalars().all()]


async def get_by_id(db: AsyncSession, article_id: int) -> dict | None:
    """Return the article with *article_id*, or None when no row matches."""
    result = await db.execute(select(Article).where(Article.id == article_id))
    article = result.scalar_one_or_none()
    if article is None:
        return None
    return _article_to_dict(article)


async def insert_article(db: AsyncSession, fields: dict) -> dict:
    """
    Insert a new article and return it as stored.

    Only the keys in ``INSERT_FIELDS`` are persisted.  The row is refreshed
    after the flush so the server-generated id and date_published are
    present in the returned dict.
    """
    article = Article(**{key: fields.get(key) for key in INSERT_FIELDS})
    db.add(article)
    await db.flush()
    await db.refresh(article)
    logger.info("Created article id=%s", article.id)
    return _article_to_dict(article)


async def update_article(db: AsyncSession, article_id: int, fields: dict) -> None:
    """Apply the non-None values among ``UPDATE_FIELDS`` in *fields*."""
    values = {
        key: value
        for key, value in fields.items()
        if key in UPDATE_FIELDS and value is not None
    }
    if not values:
        return
    await db.execute(update(Article).where(Article.id == article_id).values(**values))
    logger.info("Updated article id=%s fields=%s", article_id, sorted(values))


async def delete_article(db: AsyncSession, article_id: int) -> None:
    await db.execute(delete(Article).where(Article.id == article_id))
    logger.info("Deleted article id=%s", article_id)
