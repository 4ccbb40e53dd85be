"""Endpoints del catálogo de módulos del sistema."""
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import get_current_user
from app.core.database import get_db
from app.models import Modulo, Usuario
from app.schemas.rol import ModuloItem, ModuloListResponse

router = APIRouter(prefix="/modulos", tags=["modulos"])


@router.get(
    "",
    response_model=ModuloListResponse,
    summary="Listar módulos del sistema",
    description="Catálogo de módulos que se pueden habilitar o deshabilitar por rol o por usuario.",
)
async def listar_modulos(
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(get_current_user),
):
    result = await db.execute(select(Modulo).order_by(Modulo.orden, Modulo.id))
    return ModuloListResponse(
        modulos=[ModuloItem(id=m.id, nombre=m.nombre) for m in result.scalars().all()]
    )
