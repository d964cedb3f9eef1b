"""
Request body models.

Every field is optional at the pydantic level: which fields are required
depends on the verb, and the routers check presence explicitly in a fixed
order so that the error message names the first missing field.  Unknown
keys in a body are ignored.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RequestBody(BaseModel):
    model_config = ConfigDict(extra="ignore")


# --- Article ---

class ArticleFields(RequestBody):
    title: str | None = None
    content: str | None = None
    style: str | None = None
    author: int | None = None


class ArticlePatch(RequestBody):
    # author is fixed at creation time
    title: str | None = None
    content: str | None = None
    style: str | None = None


# --- User ---

class UserFields(RequestBody):
    fullname: str | None = None
    username: str | None = None
    password: str | None = None
    nickname: str | None = None


class UserPatch(UserFields):
    pass


# --- Comment ---

class CommentFields(RequestBody):
    text: str | None = None
    article_id: int | None = None
    user_id: int | None = None
    date_commented: datetime | None = None


class CommentPatch(RequestBody):
    text: str | None = None
    date_commented: datetime | None = None
