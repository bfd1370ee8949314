from pydantic import BaseModel, Field
from datetime import datetime
from typing import List
from uuid import UUID
from expense_tracker.models.pot_template import Occurrence

class TemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=24)
    default_currency_id: int
    occurrence: Occurrence = Occurrence.once
    user_ids: List[UUID] = []

class TemplateUserOut(BaseModel):
    id: int
    user_id: UUID
    pot_template_id: int

    class Config:
        from_attributes = True

class TemplateOut(BaseModel):
    id: int
    owner_id: UUID
    name: str
    default_currency_id: int
    occurrence: Occurrence
    created_at: datetime | None = None
    users: List[TemplateUserOut] = []

    class Config:
        from_attributes = True
