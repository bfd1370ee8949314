import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from expense_tracker.core.errors import NotFoundError
from expense_tracker.models.user import User
from expense_tracker.schemas.user import AuthUser

logger = logging.getLogger(__name__)

async def get_user_by_id(db: AsyncSession, user_id: UUID):
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()

async def get_users_by_ids(db: AsyncSession, user_ids):
    if not user_ids:
        return []
    res = await db.execute(select(User).where(User.id.in_(list(user_ids))))
    return res.scalars().all()

async def get_all_users(db: AsyncSession):
    res = await db.execute(select(User).order_by(User.name))
    return res.scalars().all()

async def ensure_user_exists(db: AsyncSession, user_id: UUID) -> User:
    user = await get_user_by_id(db, user_id)

    if user is None:
        raise NotFoundError(f"User {user_id} does not exist")

    return user

async def get_or_create_user(db: AsyncSession, auth_user: AuthUser):
    """Returns ``(user, created)`` for the caller behind the bearer token."""
    user = await get_user_by_id(db, auth_user.id)

    if user:
        return user, False

    user = User(
        id=auth_user.id,
        name=auth_user.name or str(auth_user.id)
    )

    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user, True
