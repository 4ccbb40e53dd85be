"""Endpoints de gestiones académicas: el año lectivo que forma parte de cada cupo."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import get_current_user, require_module
from app.core.config import settings
from app.core.database import get_db
from app.models import GestionAcademica, Usuario
from app.schemas.gestion_academica import (
    GestionAcademicaCreate,
    GestionAcademicaItem,
    GestionAcademicaListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gestiones", tags=["gestiones"])

MODULO = settings.modulo_gestiones_academicas


def _item(g: GestionAcademica) -> GestionAcademicaItem:
    return GestionAcademicaItem.model_validate(g, from_attributes=True)


@router.get(
    "",
    response_model=GestionAcademicaListResponse,
    summary="Listar gestiones académicas",
    description="La gestión activa aparece primero; el resto, de la más reciente a la más antigua.",
)
async def listar_gestiones(
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(get_current_user),
):
    result = await db.execute(
        select(GestionAcademica).order_by(
            GestionAcademica.activa.desc(), GestionAcademica.fecha_inicio.desc()
        )
    )
    return GestionAcademicaListResponse(gestiones=[_item(g) for g in result.scalars().all()])


@router.post(
    "",
    response_model=GestionAcademicaItem,
    status_code=status.HTTP_201_CREATED,
    summary="Crear gestión académica",
    responses={409: {"description": "Ya existe una gestión con ese nombre"}},
)
async def crear_gestion(
    body: GestionAcademicaCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(MODULO, editar=True)),
):
    """Las gestiones nuevas se crean inactivas."""
    duplicada = await db.scalar(select(GestionAcademica.id).where(GestionAcademica.nombre == body.nombre))
    if duplicada is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Ya existe una gestión con nombre '{body.nombre}'",
        )
    gestion = GestionAcademica(**body.model_dump(), activa=False)
    db.add(gestion)
    await db.flush()
    logger.info("Usuario %s creó la gestión %s", current_user.id, gestion.nombre)
    return _item(gestion)


@router.patch(
    "/{gestion_id}/activar",
    response_model=GestionAcademicaItem,
    summary="Activar gestión académica",
    description="Solo puede haber una gestión activa: la anterior se desactiva.",
    responses={404: {"description": "Gestión no encontrada"}},
)
async def activar_gestion(
    gestion_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(MODULO, editar=True)),
):
    gestion = await db.get(GestionAcademica, gestion_id)
    if gestion is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gestión no encontrada")
    await db.execute(
        update(GestionAcademica)
        .where(GestionAcademica.id != gestion_id, GestionAcademica.activa.is_(True))
        .values(activa=False)
        .execution_options(synchronize_session="fetch")
    )
    gestion.activa = True
    await db.flush()
    logger.info("Usuario %s activó la gestión %s", current_user.id, gestion.nombre)
    return _item(gestion)
