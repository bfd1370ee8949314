from pydantic import BaseModel, Field
from typing import List
from uuid import UUID
from expense_tracker.schemas.currency import CurrencyOut

class SplitInput(BaseModel):
    user_id: UUID
    amount: float = Field(..., ge=0)

class SplitOut(BaseModel):
    user_id: UUID
    amount: float
    # true for the owner's split: the owner has already paid their part
    is_paid: bool

    class Config:
        from_attributes = True

class ExpenseCreate(BaseModel):
    # defaults to the caller
    owner_id: UUID | None = None
    description: str
    currency_id: int
    splits: List[SplitInput] = Field(..., min_length=1)

class ExpenseOut(BaseModel):
    id: int
    pot_id: int
    owner_id: UUID
    description: str
    currency: CurrencyOut
    splits: List[SplitOut]
    # negative: you owe owner_id this amount, otherwise others owe you
    sum: float

class PaymentInput(BaseModel):
    amount: float = Field(..., gt=0)
