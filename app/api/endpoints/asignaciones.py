"""Endpoints de asignación de docentes a materias por grado y gestión académica."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import require_module
from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import (
    AsignacionNoEncontradaError,
    CupoOcupadoError,
    DocenteInactivoError,
    DocenteNoHabilitadoError,
)
from app.models import AsignacionDocente, GestionAcademica, Grado, Materia, Usuario
from app.schemas.asignacion import (
    AsignacionCreada,
    AsignacionCreate,
    AsignacionItem,
    AsignacionListResponse,
    DocenteItem,
    DocentesResponse,
)
from app.services import asignador_service, registro_asignaciones

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/asignaciones", tags=["asignaciones"])

MODULO = settings.modulo_gestion_asignaciones


async def _verificar_existe(db: AsyncSession, modelo, id_: int, detalle: str) -> None:
    if await db.get(modelo, id_) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detalle)


def _item(a: AsignacionDocente) -> AsignacionItem:
    return AsignacionItem(
        id=a.id,
        docente_id=a.docente_id,
        nombre_docente=a.docente.nombre if a.docente else None,
        materia_id=a.materia_id,
        nombre_materia=a.materia.nombre if a.materia else None,
        grado_id=a.grado_id,
        nombre_grado=a.grado.nombre if a.grado else None,
        gestion_id=a.gestion_id,
        asignado_por=a.asignado_por,
        created_at=a.created_at,
    )


@router.get(
    "/disponibles",
    response_model=DocentesResponse,
    summary="Docentes disponibles para un cupo",
    description="Docentes habilitados para la materia que no ocupan ya el cupo (materia, grado, gestión).",
)
async def listar_disponibles(
    materia_id: int = Query(description="ID de la materia"),
    grado_id: int = Query(description="ID del grado"),
    gestion_id: int = Query(description="ID de la gestión académica"),
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(MODULO)),
):
    ids = await asignador_service.docentes_disponibles(db, materia_id, grado_id, gestion_id)
    if not ids:
        return DocentesResponse(docentes=[])
    result = await db.execute(select(Usuario).where(Usuario.id.in_(ids)).order_by(Usuario.nombre))
    return DocentesResponse(
        docentes=[DocenteItem(id=u.id, nombre=u.nombre, email=u.email) for u in result.scalars().all()]
    )


@router.post(
    "",
    response_model=AsignacionCreada,
    status_code=status.HTTP_201_CREATED,
    summary="Asignar docente a un cupo",
    responses={
        409: {"description": "El cupo ya tiene un docente asignado"},
        404: {"description": "La materia, el grado o la gestión no existen"},
        422: {"description": "El docente no está habilitado para la materia o está inactivo"},
    },
)
async def crear_asignacion(
    body: AsignacionCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(MODULO, editar=True)),
):
    asignado_por = current_user.id
    await _verificar_existe(db, Materia, body.materia_id, "Materia no encontrada")
    await _verificar_existe(db, Grado, body.grado_id, "Grado no encontrado")
    await _verificar_existe(db, GestionAcademica, body.gestion_id, "Gestión no encontrada")
    try:
        asignacion_id = await asignador_service.solicitar_asignacion(
            db, body.docente_id, body.materia_id, body.grado_id, body.gestion_id, asignado_por
        )
    except DocenteInactivoError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"codigo": "docente_inactivo", "mensaje": "El docente está dado de baja"},
        )
    except DocenteNoHabilitadoError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "codigo": "docente_no_habilitado",
                "mensaje": "El docente no está habilitado para dictar esta materia",
            },
        )
    except CupoOcupadoError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "codigo": "cupo_ocupado",
                "mensaje": f"La materia ya tiene asignado al docente {exc.docente_id} en este grado y gestión",
            },
        )
    logger.info(
        "Usuario %s asignó docente %s a materia=%s grado=%s gestion=%s (asignación %s)",
        asignado_por,
        body.docente_id,
        body.materia_id,
        body.grado_id,
        body.gestion_id,
        asignacion_id,
    )
    return AsignacionCreada(id=asignacion_id)


@router.delete(
    "/{asignacion_id}",
    summary="Quitar asignación",
    responses={404: {"description": "La asignación no existe o ya fue quitada"}},
)
async def eliminar_asignacion(
    asignacion_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(MODULO, editar=True)),
):
    try:
        await asignador_service.quitar_asignacion(db, asignacion_id)
    except AsignacionNoEncontradaError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asignación no encontrada")
    logger.info("Usuario %s quitó la asignación %s", current_user.id, asignacion_id)
    return {"id": asignacion_id}


@router.get(
    "/grado/{grado_id}/gestion/{gestion_id}",
    response_model=AsignacionListResponse,
    summary="Asignaciones de un grado en una gestión",
)
async def listar_por_grado(
    grado_id: int,
    gestion_id: int,
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(MODULO)),
):
    filas = await registro_asignaciones.asignaciones_por_grado(db, grado_id, gestion_id)
    return AsignacionListResponse(asignaciones=[_item(a) for a in filas])


@router.get(
    "/docente/{docente_id}/gestion/{gestion_id}",
    response_model=AsignacionListResponse,
    summary="Asignaciones de un docente en una gestión",
)
async def listar_por_docente(
    docente_id: int,
    gestion_id: int,
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(MODULO)),
):
    filas = await registro_asignaciones.asignaciones_de_docente(db, docente_id, gestion_id)
    return AsignacionListResponse(asignaciones=[_item(a) for a in filas])
