"""Registro de asignaciones docente-materia-grado-gestión.

Es el único que escribe en `asignaciones_docentes` y el árbitro final de la
unicidad de cupo: a lo sumo un docente por (materia, grado, gestión). La
restricción única de la tabla hace que comprobar e insertar sea atómico;
si dos pedidos compiten por el mismo cupo, el segundo recibe
ConflictoCupoError y nunca pisa al primero.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import AsignacionNoEncontradaError, ConflictoCupoError
from app.models.asignacion_docente import AsignacionDocente

logger = logging.getLogger(__name__)

_RELACIONES = (
    selectinload(AsignacionDocente.docente),
    selectinload(AsignacionDocente.materia),
    selectinload(AsignacionDocente.grado),
)


async def cupo_ocupado(db: AsyncSession, materia_id: int, grado_id: int, gestion_id: int) -> int | None:
    """ID del docente que ocupa el cupo, o None si está libre."""
    result = await db.execute(
        select(AsignacionDocente.docente_id).where(
            AsignacionDocente.materia_id == materia_id,
            AsignacionDocente.grado_id == grado_id,
            AsignacionDocente.gestion_id == gestion_id,
        )
    )
    return result.scalar_one_or_none()


async def asignar(
    db: AsyncSession,
    docente_id: int,
    materia_id: int,
    grado_id: int,
    gestion_id: int,
    asignado_por: int | None,
) -> int:
    """Registra la asignación y devuelve su ID.

    No valida la habilitación del docente (eso lo hace el asignador); solo
    garantiza la unicidad del cupo.
    """
    ocupante = await cupo_ocupado(db, materia_id, grado_id, gestion_id)
    if ocupante is not None:
        raise ConflictoCupoError(materia_id, grado_id, gestion_id, docente_id=ocupante)

    asignacion = AsignacionDocente(
        docente_id=docente_id,
        materia_id=materia_id,
        grado_id=grado_id,
        gestion_id=gestion_id,
        asignado_por=asignado_por,
    )
    try:
        # El savepoint deshace solo este insert; lo pendiente del llamador se conserva
        async with db.begin_nested():
            db.add(asignacion)
            await db.flush()
    except IntegrityError as exc:
        # Otro pedido ocupó el cupo entre la consulta y el insert
        ocupante = await cupo_ocupado(db, materia_id, grado_id, gestion_id)
        if ocupante is None:
            raise
        logger.warning(
            "Conflicto concurrente en cupo materia=%s grado=%s gestion=%s (ocupado por docente %s)",
            materia_id,
            grado_id,
            gestion_id,
            ocupante,
        )
        raise ConflictoCupoError(materia_id, grado_id, gestion_id, docente_id=ocupante) from exc
    return asignacion.id


async def desasignar(db: AsyncSession, asignacion_id: int) -> None:
    """Quita la asignación y libera el cupo."""
    result = await db.execute(
        delete(AsignacionDocente)
        .where(AsignacionDocente.id == asignacion_id)
        .execution_options(synchronize_session="fetch")
    )
    if result.rowcount == 0:
        raise AsignacionNoEncontradaError(asignacion_id)
    await db.flush()


async def asignaciones_por_grado(db: AsyncSession, grado_id: int, gestion_id: int) -> list[AsignacionDocente]:
    """Asignaciones de un grado en una gestión, con docente, materia y grado cargados."""
    result = await db.execute(
        select(AsignacionDocente)
        .options(*_RELACIONES)
        .where(AsignacionDocente.grado_id == grado_id, AsignacionDocente.gestion_id == gestion_id)
        .order_by(AsignacionDocente.materia_id, AsignacionDocente.docente_id)
    )
    return list(result.scalars().all())


async def asignaciones_de_docente(db: AsyncSession, docente_id: int, gestion_id: int) -> list[AsignacionDocente]:
    """Asignaciones de un docente en una gestión, con docente, materia y grado cargados."""
    result = await db.execute(
        select(AsignacionDocente)
        .options(*_RELACIONES)
        .where(AsignacionDocente.docente_id == docente_id, AsignacionDocente.gestion_id == gestion_id)
        .order_by(AsignacionDocente.grado_id, AsignacionDocente.materia_id)
    )
    return list(result.scalars().all())
