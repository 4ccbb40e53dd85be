"""Endpoints de grados (niveles escolares)."""
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import get_current_user
from app.core.database import get_db
from app.models import Grado, Usuario
from app.schemas.gestion_academica import GradoItem, GradoListResponse

router = APIRouter(prefix="/grados", tags=["grados"])


@router.get("", response_model=GradoListResponse, summary="Listar grados")
async def listar_grados(
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(get_current_user),
):
    result = await db.execute(select(Grado).order_by(Grado.orden, Grado.nombre))
    return GradoListResponse(
        grados=[GradoItem(id=g.id, nombre=g.nombre, orden=g.orden) for g in result.scalars().all()]
    )
