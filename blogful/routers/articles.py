import posixpath

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.config import settings
from blogful.database import get_db
from blogful.dependencies import get_article_or_404
from blogful.models import ARTICLE_STYLES
from blogful.sanitizer import sanitize_article
from blogful.schemas import ArticleFields, ArticlePatch
from blogful.services import article_service
from blogful.validation import (
    parse_body,
    present_fields,
    require_any,
    require_choice,
    require_fields,
)

router = APIRouter(prefix=f"{settings.API_PREFIX}/articles", tags=["articles"])

REQUIRED_FIELDS = ("title", "content", "style")
PATCHABLE_FIELDS = ("title", "style", "content")


@router.get("")
@router.get("/", include_in_schema=False)
async def list_articles(db: AsyncSession = Depends(get_db)):
    articles = await article_service.get_all_articles(db)
    return [sanitize_article(a) for a in articles]


@router.post("", status_code=201)
@router.post("/", status_code=201, include_in_schema=False)
async def create_article(
    request: Request,
    response: Response,
    data: ArticleFields | None = None,
    db: AsyncSession = Depends(get_db),
):
    data = data or ArticleFields()
    require_fields(data, REQUIRED_FIELDS)
    require_choice(data.style, "style", ARTICLE_STYLES)

    article = await article_service.insert_article(db, data.model_dump())
    # posixpath.join keeps a trailing slash on the request path from doubling up
    response.headers["Location"] = posixpath.join(request.url.path, str(article["id"]))
    return sanitize_article(article)


@router.get("/{article_id}")
async def get_article(article: dict = Depends(get_article_or_404)):
    return sanitize_article(article)


@router.patch("/{article_id}", status_code=204)
async def update_article(
    request: Request,
    article: dict = Depends(get_article_or_404),
    db: AsyncSession = Depends(get_db),
):
    data = await parse_body(request, ArticlePatch)
    require_any(data, PATCHABLE_FIELDS)
    changes = present_fields(data, PATCHABLE_FIELDS)
    require_choice(changes.get("style"), "style", ARTICLE_STYLES)
    await article_service.update_article(db, article["id"], changes)


@router.delete("/{article_id}", status_code=204)
async def delete_article(
    article: dict = Depends(get_article_or_404),
    db: AsyncSession = Depends(get_db),
):
    await article_service.delete_article(db, article["id"])
