import logging
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from expense_tracker.core.errors import ConflictError, ForbiddenError, NotFoundError
from expense_tracker.core.guards import build_splits, ensure_not_archived
from expense_tracker.core.settlement import can_view_pot, get_sum, visible_expenses
from expense_tracker.models.expense import Expense
from expense_tracker.models.pot import Pot
from expense_tracker.schemas.expense import ExpenseCreate
from expense_tracker.services.currency_services import get_currency_by_id
from expense_tracker.services.pot_services import get_visible_pot

logger = logging.getLogger(__name__)

def _expense_query():
    return (
        select(Expense)
        .options(
            selectinload(Expense.splits),
            selectinload(Expense.currency),
            selectinload(Expense.pot).selectinload(Pot.members),
        )
        .execution_options(populate_existing=True)
    )

def expense_out(expense: Expense, viewer_id: UUID) -> dict:
    return {
        "id": expense.id,
        "pot_id": expense.pot_id,
        "owner_id": expense.owner_id,
        "description": expense.description,
        "currency": expense.currency,
        "splits": sorted(expense.splits, key=lambda s: str(s.user_id)),
        "sum": get_sum(expense.owner_id, viewer_id, expense.splits),
    }

async def load_expense(db: AsyncSession, expense_id: int) -> Expense:
    res = await db.execute(_expense_query().where(Expense.id == expense_id))
    expense = res.scalar_one_or_none()

    if not expense:
        raise NotFoundError(f"Expense {expense_id} not found")

    return expense

async def create_expense(db: AsyncSession, pot_id: int, data: ExpenseCreate, requester_id: UUID):
    pot = await get_visible_pot(db, pot_id, requester_id)
    ensure_not_archived(pot)

    owner_id = data.owner_id or requester_id

    if owner_id not in pot.member_ids:
        raise HTTPException(400, "Payer is not a member of the pot")

    # -----------------------------------
    # Validate split users
    # -----------------------------------
    outsiders = {s.user_id for s in data.splits} - pot.member_ids

    if outsiders:
        raise HTTPException(400, "One or more users in splits are not members of the pot")

    await get_currency_by_id(db, data.currency_id)

    # -----------------------------------
    # Create expense and splits together
    # -----------------------------------
    try:
        expense = Expense(
            pot_id=pot_id,
            owner_id=owner_id,
            description=data.description,
            currency_id=data.currency_id
        )

        db.add(expense)
        await db.flush()  # generates expense.id

        db.add_all(build_splits(expense.id, owner_id, data.splits))

        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info("User %s created expense %s in pot %s", requester_id, expense.id, pot_id)

    expense = await load_expense(db, expense.id)
    return expense_out(expense, requester_id)

async def get_expense_by_id(db: AsyncSession, expense_id: int, viewer_id: UUID):
    expense = await load_expense(db, expense_id)

    # expenses of pots the viewer can't see don't exist for them
    if not can_view_pot(expense.pot, viewer_id):
        raise NotFoundError(f"Expense {expense_id} not found")

    return expense_out(expense, viewer_id)

async def get_expenses_by_pot_id(db: AsyncSession, pot_id: int, viewer_id: UUID):
    await get_visible_pot(db, pot_id, viewer_id)

    q = _expense_query().where(Expense.pot_id == pot_id).order_by(Expense.id)
    res = await db.execute(q)

    return [
        expense_out(expense, viewer_id)
        for expense in visible_expenses(viewer_id, res.scalars().all())
    ]

async def pay_expense(db: AsyncSession, expense_id: int, requester_id: UUID, payment_amount: float):
    """
    The requester pays their unpaid split of the expense. Only the exact amount
    is accepted; over- and underpaying are conflicts.
    """
    expense = await load_expense(db, expense_id)

    if not can_view_pot(expense.pot, requester_id):
        raise NotFoundError(f"Expense {expense_id} not found")

    ensure_not_archived(expense.pot)

    requester_splits = [s for s in expense.splits if s.user_id == requester_id]

    if not requester_splits:
        raise ForbiddenError("You have no split in this expense!")

    for split in requester_splits:
        if not split.is_paid:
            if split.amount > payment_amount:
                raise ConflictError("Can't underpay!")
            if split.amount < payment_amount:
                raise ConflictError("Can't overpay!")

            split.is_paid = True
            await db.commit()

            logger.info("User %s paid %s for expense %s", requester_id, payment_amount, expense_id)
            break

    return expense_out(expense, requester_id)
