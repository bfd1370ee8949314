import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from expense_tracker.core.errors import ForbiddenError, NotFoundError
from expense_tracker.models.pot_template import PotTemplate, PotTemplateUser
from expense_tracker.schemas.template import TemplateCreate
from expense_tracker.services.currency_services import get_currency_by_id
from expense_tracker.services.user_service import get_users_by_ids

logger = logging.getLogger(__name__)

async def _load_template(db: AsyncSession, template_id: int):
    q = (
        select(PotTemplate)
        .where(PotTemplate.id == template_id)
        .options(selectinload(PotTemplate.users))
        .execution_options(populate_existing=True)
    )
    res = await db.execute(q)
    return res.scalar_one_or_none()

async def create_template(db: AsyncSession, data: TemplateCreate, owner_id: UUID):
    await get_currency_by_id(db, data.default_currency_id)

    # the owner always takes part in pots created from their template
    user_ids = list(dict.fromkeys([owner_id, *data.user_ids]))

    known = {u.id for u in await get_users_by_ids(db, user_ids)}
    missing = [str(uid) for uid in user_ids if uid not in known]

    if missing:
        raise NotFoundError(f"Users {', '.join(missing)} do not exist")

    try:
        template = PotTemplate(
            owner_id=owner_id,
            name=data.name,
            default_currency_id=data.default_currency_id,
            occurrence=data.occurrence
        )
        db.add(template)
        await db.flush()

        db.add_all([
            PotTemplateUser(user_id=uid, pot_template_id=template.id)
            for uid in user_ids
        ])

        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info("User %s created template %s", owner_id, template.id)
    return await _load_template(db, template.id)

async def list_templates(db: AsyncSession, owner_id: UUID):
    q = (
        select(PotTemplate)
        .where(PotTemplate.owner_id == owner_id)
        .options(selectinload(PotTemplate.users))
        .order_by(PotTemplate.id)
    )
    res = await db.execute(q)
    return res.scalars().all()

async def delete_template(db: AsyncSession, template_id: int, requester_id: UUID):
    template = await _load_template(db, template_id)

    if not template or template.owner_id != requester_id:
        raise ForbiddenError(f"The user does not own the pot template with id {template_id}")

    await db.delete(template)
    await db.commit()

    logger.info("User %s deleted template %s", requester_id, template_id)
    return {"status": "deleted"}
