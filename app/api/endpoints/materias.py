"""Endpoints de materias y de habilitación de docentes por materia."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import get_current_user, require_module
from app.core.config import settings
from app.core.database import get_db
from app.models import Materia, Usuario
from app.schemas.asignacion import DocenteItem, DocentesResponse
from app.schemas.materia import MateriaItem, MateriaListResponse
from app.services import habilitaciones_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/materias", tags=["materias"])


async def _materia_existente(db: AsyncSession, materia_id: int) -> Materia:
    materia = await db.get(Materia, materia_id)
    if not materia:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Materia no encontrada")
    return materia


@router.get(
    "",
    response_model=MateriaListResponse,
    summary="Listar materias",
)
async def listar_materias(
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(get_current_user),
):
    result = await db.execute(select(Materia).order_by(Materia.nombre))
    return MateriaListResponse(
        materias=[MateriaItem(id=m.id, nombre=m.nombre) for m in result.scalars().all()]
    )


@router.get(
    "/{materia_id}/docentes",
    response_model=DocentesResponse,
    summary="Docentes habilitados para la materia",
)
async def listar_docentes_habilitados(
    materia_id: int,
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(get_current_user),
):
    await _materia_existente(db, materia_id)
    ids = await habilitaciones_service.docentes_habilitados(db, materia_id)
    if not ids:
        return DocentesResponse(docentes=[])
    result = await db.execute(select(Usuario).where(Usuario.id.in_(ids)).order_by(Usuario.nombre))
    return DocentesResponse(
        docentes=[DocenteItem(id=u.id, nombre=u.nombre, email=u.email) for u in result.scalars().all()]
    )


@router.post(
    "/{materia_id}/docentes/{docente_id}",
    status_code=status.HTTP_201_CREATED,
    summary="Habilitar docente para la materia",
)
async def habilitar_docente(
    materia_id: int,
    docente_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(settings.modulo_gestion_asignaciones, editar=True)),
):
    await _materia_existente(db, materia_id)
    if not await db.get(Usuario, docente_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Docente no encontrado")
    creada = await habilitaciones_service.habilitar_docente(db, docente_id, materia_id)
    if creada:
        logger.info("Usuario %s habilitó al docente %s para la materia %s", current_user.id, docente_id, materia_id)
    return {"docente_id": docente_id, "materia_id": materia_id, "creada": creada}


@router.delete(
    "/{materia_id}/docentes/{docente_id}",
    summary="Revocar habilitación del docente",
    description="Las asignaciones ya registradas no se eliminan.",
)
async def revocar_habilitacion(
    materia_id: int,
    docente_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(settings.modulo_gestion_asignaciones, editar=True)),
):
    if not await habilitaciones_service.revocar_habilitacion(db, docente_id, materia_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Habilitación no encontrada")
    logger.info("Usuario %s revocó al docente %s la materia %s", current_user.id, docente_id, materia_id)
    return {"docente_id": docente_id, "materia_id": materia_id}
