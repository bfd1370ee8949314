from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from expense_tracker.core.errors import ConflictError, NotFoundError
from expense_tracker.models.currency import Currency
from expense_tracker.schemas.currency import CurrencyCreate

async def get_currencies(db: AsyncSession):
    res = await db.execute(select(Currency).order_by(Currency.id))
    return res.scalars().all()

async def get_currency_by_id(db: AsyncSession, currency_id: int):
    res = await db.execute(select(Currency).where(Currency.id == currency_id))
    currency = res.scalar_one_or_none()

    if not currency:
        raise NotFoundError(f"Currency {currency_id} not found")

    return currency

async def get_currency_by_symbol(db: AsyncSession, symbol: str):
    res = await db.execute(select(Currency).where(Currency.symbol == symbol))
    return res.scalar_one_or_none()

async def create_currency(db: AsyncSession, data: CurrencyCreate):
    existing = await get_currency_by_symbol(db, data.symbol)

    if existing:
        raise ConflictError(f"There is already a currency with symbol {data.symbol}!")

    currency = Currency(name=data.name, symbol=data.symbol)

    db.add(currency)
    await db.commit()
    await db.refresh(currency)
    return currency
