from uuid import UUID

from fastapi import HTTPException, Request

from expense_tracker.db.session import async_session
from expense_tracker.core.security import verify_bearer_token
from expense_tracker.schemas.user import AuthUser

SUB_CLAIM = "sub"
PREFERRED_USERNAME_CLAIM = "preferred_username"

async def get_db():
    async with async_session() as session:
        yield session

def user_from_claims(claims: dict) -> AuthUser:
    user_id = claims.get(SUB_CLAIM)

    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    try:
        user_id = UUID(str(user_id))
    except ValueError:
        raise HTTPException(status_code=401, detail="Sub claim must be a UUID")

    return AuthUser(id=user_id, name=claims.get(PREFERRED_USERNAME_CLAIM))

async def get_current_user(request: Request) -> AuthUser:
    claims = await verify_bearer_token(request)
    return user_from_claims(claims)
