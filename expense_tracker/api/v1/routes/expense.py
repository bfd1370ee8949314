from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.core.dependencies import get_current_user, get_db
from expense_tracker.schemas.expense import ExpenseOut, PaymentInput
from expense_tracker.schemas.user import AuthUser
from expense_tracker.services.expense_services import get_expense_by_id, pay_expense

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("/{expense_id}", response_model=ExpenseOut)
async def fetch(
    expense_id: int,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await get_expense_by_id(db, expense_id, viewer_id=user.id)


@router.post("/{expense_id}/pay", response_model=ExpenseOut)
async def pay(
    expense_id: int,
    data: PaymentInput,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await pay_expense(db, expense_id, user.id, data.amount)
