from pydantic import BaseModel
from uuid import UUID

class AuthUser(BaseModel):
    """The caller, as described by the validated bearer token."""
    id: UUID
    name: str | None = None

class UserOut(BaseModel):
    id: UUID
    name: str

    class Config:
        from_attributes = True
