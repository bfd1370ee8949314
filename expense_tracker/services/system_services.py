from expense_tracker.db.session import engine
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.models.user import User
from expense_tracker.models.pot import Pot
from expense_tracker.models.expense import Expense

async def check_db_service():
    try:
        async with engine.connect() as conn:
            await conn.exec_driver_sql("SELECT 1")
        return {"db": True, "message": "Database is connected"}
    except (SQLAlchemyError, OSError) as e:
        return {"db": False, "error": str(e)}

async def system_health():
    return "Pong"

async def system_metrics(db: AsyncSession):
    users_q = select(func.count(User.id))
    pots_q = select(func.count(Pot.id))
    expenses_q = select(func.count(Expense.id))

    users_res = await db.execute(users_q)
    pots_res = await db.execute(pots_q)
    expenses_res = await db.execute(expenses_q)

    return {
        "users": users_res.scalar(),
        "pots": pots_res.scalar(),
        "expenses": expenses_res.scalar()
    }
