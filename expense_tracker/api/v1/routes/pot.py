from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.core.dependencies import get_current_user, get_db
from expense_tracker.schemas.expense import ExpenseCreate, ExpenseOut
from expense_tracker.schemas.pot import PotBalanceOut, PotCreate, PotMemberOut, PotOut, PotWithUsersOut
from expense_tracker.schemas.user import AuthUser
from expense_tracker.services.expense_services import create_expense, get_expenses_by_pot_id
from expense_tracker.services.pot_services import (
    add_member,
    archive_pot,
    create_pot,
    delete_pot,
    get_pot_balance,
    get_pot_by_id,
    list_pots_for_user,
    remove_member,
)

router = APIRouter(prefix="/pots", tags=["Pots"])


@router.post("", response_model=PotWithUsersOut, status_code=status.HTTP_201_CREATED)
async def create_new_pot(
    data: PotCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await create_pot(db, data, user.id)


@router.get("", response_model=list[PotWithUsersOut], description="pots the caller owns or is part of")
async def my_pots(db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await list_pots_for_user(db, user.id)


@router.get("/{pot_id}", response_model=PotWithUsersOut)
async def fetch_pot(pot_id: int, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await get_pot_by_id(db, pot_id, user.id)


@router.delete("/{pot_id}", description="only possible once every split in the pot is paid")
async def del_pot(pot_id: int, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await delete_pot(db, pot_id, requester_id=user.id)


@router.put("/{pot_id}/archive", response_model=PotOut)
async def archive(pot_id: int, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await archive_pot(db, pot_id, requester_id=user.id)


@router.post("/{pot_id}/users/{user_id}", response_model=PotMemberOut, status_code=status.HTTP_201_CREATED)
async def add_user_to_pot(
    pot_id: int,
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return await add_member(db, pot_id, user_id, requester_id=user.id)


@router.delete("/{pot_id}/users/{user_id}")
async def remove_user_from_pot(
    pot_id: int,
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return await remove_member(db, pot_id, user_id, requester_id=user.id)


@router.get("/{pot_id}/balance", response_model=PotBalanceOut)
async def pot_balance(pot_id: int, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await get_pot_balance(db, pot_id, viewer_id=user.id)


@router.post("/{pot_id}/expenses", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED)
async def add_expense(
    pot_id: int,
    data: ExpenseCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return await create_expense(db, pot_id, data, requester_id=user.id)


@router.get("/{pot_id}/expenses", response_model=list[ExpenseOut], description="get all expenses of the pot")
async def all_expenses(pot_id: int, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await get_expenses_by_pot_id(db, pot_id, viewer_id=user.id)
