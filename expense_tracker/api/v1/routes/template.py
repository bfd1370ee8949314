from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from expense_tracker.core.dependencies import get_current_user, get_db
from expense_tracker.schemas.template import TemplateCreate, TemplateOut
from expense_tracker.schemas.user import AuthUser
from expense_tracker.services.template_services import create_template, delete_template, list_templates

router = APIRouter(prefix="/templates", tags=["Templates"])


@router.post("", response_model=TemplateOut, status_code=status.HTTP_201_CREATED)
async def add_template(
    data: TemplateCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
):
    return await create_template(db, data, user.id)


@router.get("", response_model=list[TemplateOut])
async def my_templates(db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await list_templates(db, user.id)


@router.delete("/{template_id}")
async def del_template(template_id: int, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await delete_template(db, template_id, requester_id=user.id)
