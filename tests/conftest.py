import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from expense_tracker.main import app
from expense_tracker.core.dependencies import get_current_user, get_db
from expense_tracker.db.base import Base, Currency, User
from expense_tracker.schemas.user import AuthUser

ALICE = uuid.UUID("e6be621a-ec2d-48f3-8027-0d34cf5cbe40")
BOB = uuid.UUID("729c270f-74d1-436f-aa46-4fe6a3dcb460")
CAROL = uuid.UUID("7ec9119b-10a2-48b8-be5f-d0f8ba9aad8d")
MALLORY = uuid.UUID("95f5222d-1b50-407e-b13e-8213d39764cd")

API = "/api/v1"


class Caller:
    """Who the overridden auth dependency says is calling."""

    def __init__(self, user_id=ALICE):
        self.user = AuthUser(id=user_id)

    def act_as(self, user_id, name=None):
        self.user = AuthUser(id=user_id, name=name)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    factory = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as db:
        db.add_all([
            User(id=ALICE, name="alice"),
            User(id=BOB, name="bob"),
            User(id=CAROL, name="carol"),
            User(id=MALLORY, name="mallory"),
            Currency(name="Euro", symbol="EUR"),
        ])
        await db.commit()

    return factory


@pytest.fixture
def caller():
    return Caller()


@pytest.fixture
async def client(session_factory, caller):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def override_get_current_user():
        return caller.user

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = override_get_current_user

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


# ── Helpers ────────────────────────────────────────────────────────────────

async def make_pot(client, caller, owner=ALICE, members=(), name="Holiday"):
    caller.act_as(owner)
    resp = await client.post(f"{API}/pots", json={"name": name, "default_currency_id": 1})
    assert resp.status_code == 201, resp.text
    pot = resp.json()

    for member in members:
        resp = await client.post(f"{API}/pots/{pot['id']}/users/{member}")
        assert resp.status_code == 201, resp.text

    return pot


async def make_expense(client, caller, pot_id, owner, splits, description="Dinner"):
    caller.act_as(owner)
    return await client.post(
        f"{API}/pots/{pot_id}/expenses",
        json={
            "description": description,
            "currency_id": 1,
            "splits": [{"user_id": str(uid), "amount": amount} for uid, amount in splits],
        },
    )
