import posixpath

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.config import settings
from blogful.database import get_db
from blogful.dependencies import get_user_or_404
from blogful.errors import ApiError
from blogful.sanitizer import sanitize_user
from blogful.schemas import UserFields, UserPatch
from blogful.services import user_service
from blogful.validation import parse_body, present_fields, require_any, require_fields

router = APIRouter(prefix=f"{settings.API_PREFIX}/users", tags=["users"])

REQUIRED_FIELDS = ("fullname", "username")
PATCHABLE_FIELDS = ("fullname", "username", "password", "nickname")
DUPLICATE_USERNAME = "Username already taken"


@router.get("")
@router.get("/", include_in_schema=False)
async def list_users(db: AsyncSession = Depends(get_db)):
    return [sanitize_user(u) for u in await user_service.get_all_users(db)]


@router.post("", status_code=201)
@router.post("/", status_code=201, include_in_schema=False)
async def create_user(
    request: Request,
    response: Response,
    data: UserFields | None = None,
    db: AsyncSession = Depends(get_db),
):
    data = data or UserFields()
    require_fields(data, REQUIRED_FIELDS)
    try:
        user = await user_service.insert_user(db, data.model_dump())
    except IntegrityError:
        raise ApiError(409, DUPLICATE_USERNAME)
    response.headers["Location"] = posixpath.join(request.url.path, str(user["id"]))
    return sanitize_user(user)


@router.get("/{user_id}")
async def get_user(user: dict = Depends(get_user_or_404)):
    return sanitize_user(user)


@router.patch("/{user_id}", status_code=204)
async def update_user(
    request: Request,
    user: dict = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
):
    data = await parse_body(request, UserPatch)
    require_any(data, PATCHABLE_FIELDS)
    try:
        await user_service.update_user(db, user["id"], present_fields(data, PATCHABLE_FIELDS))
    except IntegrityError:
        raise ApiError(409, DUPLICATE_USERNAME)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user: dict = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
):
    await user_service.delete_user(db, user["id"])
