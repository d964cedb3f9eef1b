import posixpath

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.config import settings
from blogful.database import get_db
from blogful.dependencies import get_comment_or_404
from blogful.sanitizer import sanitize_comment
from blogful.schemas import CommentFields, CommentPatch
from blogful.services import comment_service
from blogful.validation import parse_body, present_fields, require_any, require_fields

router = APIRouter(prefix=f"{settings.API_PREFIX}/comments", tags=["comments"])

REQUIRED_FIELDS = ("text", "article_id", "user_id")
PATCHABLE_FIELDS = ("text", "date_commented")


@router.get("")
@router.get("/", include_in_schema=False)
async def list_comments(db: AsyncSession = Depends(get_db)):
    return [sanitize_comment(c) for c in await comment_service.get_all_comments(db)]


@router.post("", status_code=201)
@router.post("/", status_code=201, include_in_schema=False)
async def create_comment(
    request: Request,
    response: Response,
    data: CommentFields | None = None,
    db: AsyncSession = Depends(get_db),
):
    data = data or CommentFields()
    require_fields(data, REQUIRED_FIELDS)
    comment = await comment_service.insert_comment(db, data.model_dump())
    response.headers["Location"] = posixpath.join(request.url.path, str(comment["id"]))
    return sanitize_comment(comment)


@router.get("/{comment_id}")
async def get_comment(comment: dict = Depends(get_comment_or_404)):
    return sanitize_comment(comment)


@router.patch("/{comment_id}", status_code=204)
async def update_comment(
    request: Request,
    comment: dict = Depends(get_comment_or_404),
    db: AsyncSession = Depends(get_db),
):
    data = await parse_body(request, CommentPatch)
    require_any(data, PATCHABLE_FIELDS)
    await comment_service.update_comment(db, comment["id"], present_fields(data, PATCHABLE_FIELDS))


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment: dict = Depends(get_comment_or_404),
    db: AsyncSession = Depends(get_db),
):
    await comment_service.delete_comment(db, comment["id"])
