from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.core.dependencies import get_current_user, get_db
from expense_tracker.schemas.currency import CurrencyCreate, CurrencyOut
from expense_tracker.schemas.user import AuthUser
from expense_tracker.services.currency_services import create_currency, get_currencies, get_currency_by_id

router = APIRouter(prefix="/currencies", tags=["Currencies"])


@router.get("", response_model=list[CurrencyOut])
async def all_currencies(
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await get_currencies(db)


@router.get("/{currency_id}", response_model=CurrencyOut)
async def fetch_currency(
    currency_id: int,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await get_currency_by_id(db, currency_id)


@router.post("", response_model=CurrencyOut, status_code=status.HTTP_201_CREATED)
async def add_currency(
    data: CurrencyCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await create_currency(db, data)
