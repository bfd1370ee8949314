from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.core.dependencies import get_current_user, get_db
from expense_tracker.schemas.user import AuthUser, UserOut
from expense_tracker.services.user_service import get_all_users, get_or_create_user

router = APIRouter(tags=["Users"])


@router.get("/current_user", response_model=UserOut)
async def current_user(
    response: Response,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    db_user, created = await get_or_create_user(db, user)

    if created:
        response.status_code = status.HTTP_201_CREATED

    return db_user


@router.get("/users", response_model=list[UserOut])
async def get_users(
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await get_all_users(db)
