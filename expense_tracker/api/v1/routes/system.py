from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.services.system_services import check_db_service, system_metrics, system_health
from expense_tracker.core.dependencies import get_current_user, get_db

router = APIRouter(tags=["System"])

@router.get("/health", description="liveness probe, always answers Pong")
async def health():
    return await system_health()

@router.get("/health/db", description="503 while the database is unreachable")
async def check_db(response: Response):
    result = await check_db_service()

    if not result["db"]:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return result

@router.get("/metrics", dependencies=[Depends(get_current_user)])
async def row_counts(db: AsyncSession = Depends(get_db)):
    return await system_metrics(db)
