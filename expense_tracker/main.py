import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import expense_tracker.db.base  # noqa: F401  registers all models
from expense_tracker.core.config import settings
from expense_tracker.core.db_check import wait_for_db
from expense_tracker.api.v1.routes.system import router as system_router
from expense_tracker.api.v1.routes.user import router as user_router
from expense_tracker.api.v1.routes.currency import router as currency_router
from expense_tracker.api.v1.routes.pot import router as pot_router
from expense_tracker.api.v1.routes.expense import router as expense_router
from expense_tracker.api.v1.routes.template import router as template_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

API_PREFIX = "/api/v1"

@asynccontextmanager
async def lifespan(app: FastAPI):
    await wait_for_db()
    yield

app = FastAPI(title="Expense Tracker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_URL],
    allow_methods=["*"],
    allow_headers=["Authorization", "Accept", "Content-Type"],
    max_age=3600,
)

@app.get("/")
async def root():
    return {"message": "Expense Tracker is live"}

app.include_router(system_router, prefix=API_PREFIX)
app.include_router(user_router, prefix=API_PREFIX)
app.include_router(currency_router, prefix=API_PREFIX)
app.include_router(pot_router, prefix=API_PREFIX)
app.include_router(expense_router, prefix=API_PREFIX)
app.include_router(template_router, prefix=API_PREFIX)
