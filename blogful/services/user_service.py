"""
User service: data access for the ``blogful_users`` table.

The stored password is never part of a returned record.  Username
uniqueness is enforced by the database; the router translates the
resulting ``IntegrityError`` into a 409.
"""
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogful.models import User

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = ("fullname", "username", "password", "nickname")


def _user_to_dict(user: User) -> dict:
    """Serialise a User ORM instance to a plain dict (password omitted)."""
    return {
        "id": user.id,
        "fullname": user.fullname,
        "username": user.username,
        "nickname": user.nickname,
        "date_created": user.date_created.isoformat() if user.date_created else None,
    }


async def get_all_users(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(User).order_by(User.id))
    return [_user_to_dict(u) for u in result.scalars().all()]


async def get_by_id(db: AsyncSession, user_id: int) -> dict | None:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        return None
    return _user_to_dict(user)


async def insert_user(db: AsyncSession, fields: dict) -> dict:
    user = User(**{key: fields.get(key) for key in WRITABLE_FIELDS})
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info("Created user id=%s", user.id)
    return _user_to_dict(user)


async def update_user(db: AsyncSession, user_id: int, fields: dict) -> None:
    values = {
        key: value
        for key, value in fields.items()
        if key in WRITABLE_FIELDS and value is not None
    }
    if not values:
        return
    await db.execute(update(User).where(User.id == user_id).values(**values))
    logger.info("Updated user id=%s fields=%s", user_id, sorted(values))


async def delete_user(db: AsyncSession, user_id: int) -> None:
    await db.execute(delete(User).where(User.id == user_id))
    logger.info("Deleted user id=%s", user_id)
