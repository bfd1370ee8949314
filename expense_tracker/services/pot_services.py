import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from expense_tracker.core.errors import NotFoundError
from expense_tracker.core.guards import (
    ensure_can_add_member,
    ensure_can_remove_member,
    ensure_pot_deletable,
    ensure_pot_owner,
)
from expense_tracker.core.settlement import can_view_pot, settle_pot
from expense_tracker.models.expense import Expense
from expense_tracker.models.pot import Pot
from expense_tracker.models.pot_member import PotMember
from expense_tracker.schemas.pot import PotCreate
from expense_tracker.services.currency_services import get_currency_by_id
from expense_tracker.services.user_service import ensure_user_exists, get_users_by_ids

logger = logging.getLogger(__name__)

async def load_pot(db: AsyncSession, pot_id: int, with_expenses: bool = False) -> Pot:
    options = [selectinload(Pot.members)]

    if with_expenses:
        options.append(selectinload(Pot.expenses).selectinload(Expense.splits))

    q = (
        select(Pot)
        .where(Pot.id == pot_id)
        .options(*options)
        .execution_options(populate_existing=True)
    )

    res = await db.execute(q)
    pot = res.scalar_one_or_none()

    if not pot:
        raise NotFoundError(f"Pot {pot_id} not found")

    return pot

async def get_visible_pot(db: AsyncSession, pot_id: int, user_id: UUID, with_expenses: bool = False) -> Pot:
    pot = await load_pot(db, pot_id, with_expenses=with_expenses)

    if not can_view_pot(pot, user_id):
        raise NotFoundError(f"Pot {pot_id} not found")

    return pot

def pot_with_users(pot: Pot, users_by_id: dict) -> dict:
    return {
        "id": pot.id,
        "owner_id": pot.owner_id,
        "name": pot.name,
        "default_currency_id": pot.default_currency_id,
        "archived": pot.archived,
        "created_at": pot.created_at,
        "archived_at": pot.archived_at,
        "users": [users_by_id[uid] for uid in sorted(pot.member_ids, key=str) if uid in users_by_id],
    }

async def create_pot(db: AsyncSession, data: PotCreate, owner_id: UUID):
    await get_currency_by_id(db, data.default_currency_id)
    await ensure_user_exists(db, owner_id)

    pot = Pot(
        owner_id=owner_id,
        name=data.name,
        default_currency_id=data.default_currency_id
    )
    db.add(pot)
    await db.flush()

    db.add(PotMember(pot_id=pot.id, user_id=owner_id))

    await db.commit()

    pot = await load_pot(db, pot.id)
    users = await get_users_by_ids(db, pot.member_ids)

    logger.info("User %s created pot %s", owner_id, pot.id)
    return pot_with_users(pot, {u.id: u for u in users})

async def list_pots_for_user(db: AsyncSession, user_id: UUID):
    # pots the user is only a member of (not the owner)
    member_of = select(PotMember.pot_id).where(PotMember.user_id == user_id)

    q = (
        select(Pot)
        .where((Pot.owner_id == user_id) | (Pot.id.in_(member_of)))
        .options(selectinload(Pot.members))
        .order_by(Pot.created_at.desc(), Pot.id.desc())
    )

    res = await db.execute(q)
    pots = res.scalars().all()

    user_ids = set()
    for pot in pots:
        user_ids |= pot.member_ids

    users = await get_users_by_ids(db, user_ids)
    users_by_id = {u.id: u for u in users}

    return [pot_with_users(pot, users_by_id) for pot in pots]

async def get_pot_by_id(db: AsyncSession, pot_id: int, user_id: UUID):
    pot = await get_visible_pot(db, pot_id, user_id)
    users = await get_users_by_ids(db, pot.member_ids)
    return pot_with_users(pot, {u.id: u for u in users})

async def add_member(db: AsyncSession, pot_id: int, user_id: UUID, requester_id: UUID):
    pot = await load_pot(db, pot_id)

    ensure_can_add_member(pot, requester_id, user_id)
    await ensure_user_exists(db, user_id)

    member = PotMember(pot_id=pot_id, user_id=user_id)
    db.add(member)
    await db.commit()

    logger.info("User %s added to pot %s", user_id, pot_id)
    return member

async def remove_member(db: AsyncSession, pot_id: int, user_id: UUID, requester_id: UUID):
    pot = await load_pot(db, pot_id)

    ensure_can_remove_member(pot, requester_id, user_id)

    member = next(m for m in pot.members if m.user_id == user_id)
    await db.delete(member)
    await db.commit()

    logger.info("User %s removed from pot %s", user_id, pot_id)
    return {"status": "member_removed"}

async def delete_pot(db: AsyncSession, pot_id: int, requester_id: UUID):
    pot = await load_pot(db, pot_id, with_expenses=True)

    ensure_pot_deletable(pot, requester_id)

    await db.delete(pot)
    await db.commit()

    logger.info("User %s deleted pot %s", requester_id, pot_id)
    return {"status": "deleted"}

async def archive_pot(db: AsyncSession, pot_id: int, requester_id: UUID):
    pot = await load_pot(db, pot_id)

    ensure_pot_owner(pot, requester_id)

    if not pot.archived:
        pot.archived = True
        pot.archived_at = datetime.now(timezone.utc)
        await db.commit()
        logger.info("User %s archived pot %s", requester_id, pot_id)

    return pot

async def get_pot_balance(db: AsyncSession, pot_id: int, viewer_id: UUID):
    pot = await load_pot(db, pot_id, with_expenses=True)

    sums = settle_pot(pot, viewer_id)

    return {
        "pot_id": pot.id,
        "viewer_id": viewer_id,
        "total": sums.total(),
        "expenses": [
            {"expense_id": expense_id, "sum": amount}
            for expense_id, amount in sums
        ],
    }
