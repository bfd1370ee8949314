from pydantic import BaseModel, Field
from datetime import datetime
from typing import List
from uuid import UUID
from expense_tracker.schemas.user import UserOut

class PotCreate(BaseModel):
    name: str = Field(..., min_length=1)
    default_currency_id: int

class PotOut(BaseModel):
    id: int
    owner_id: UUID
    name: str
    default_currency_id: int
    archived: bool
    created_at: datetime | None = None
    archived_at: datetime | None = None

    class Config:
        from_attributes = True

class PotWithUsersOut(PotOut):
    users: List[UserOut] = []

class PotMemberOut(BaseModel):
    pot_id: int
    user_id: UUID

    class Config:
        from_attributes = True

class ExpenseSumOut(BaseModel):
    expense_id: int
    sum: float

class PotBalanceOut(BaseModel):
    """If ``total`` is negative the viewer owes money, otherwise others owe the viewer."""
    pot_id: int
    viewer_id: UUID
    total: float
    expenses: List[ExpenseSumOut]
