"""Asignador de docentes a cupos (materia, grado, gestión).

Combina el índice de habilitaciones con el registro de asignaciones:

- La habilitación es una regla de negocio y se revisa aquí, antes de intentar
  escribir.
- La unicidad del cupo es una regla de integridad y la revisa el registro,
  de modo que nadie la rompe aunque llame al registro sin pasar por aquí.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ConflictoCupoError,
    CupoOcupadoError,
    DocenteInactivoError,
    DocenteNoHabilitadoError,
)
from app.services import habilitaciones_service, registro_asignaciones


async def docentes_disponibles(
    db: AsyncSession, materia_id: int, grado_id: int, gestion_id: int
) -> list[int]:
    """Docentes activos habilitados para la materia, menos el que ya ocupa ese cupo exacto.

    Tener la misma materia asignada en otro grado o gestión no quita
    disponibilidad: solo cuenta la habilitación.
    """
    habilitados = await habilitaciones_service.docentes_habilitados(db, materia_id, solo_activos=True)
    ocupante = await registro_asignaciones.cupo_ocupado(db, materia_id, grado_id, gestion_id)
    habilitados.discard(ocupante)
    return sorted(habilitados)


async def solicitar_asignacion(
    db: AsyncSession,
    docente_id: int,
    materia_id: int,
    grado_id: int,
    gestion_id: int,
    asignado_por: int | None,
) -> int:
    """Valida y registra la asignación; devuelve el ID creado.

    Lanza DocenteNoHabilitadoError sin escribir nada si el docente no está
    habilitado (DocenteInactivoError si está habilitado pero dado de baja), y
    CupoOcupadoError si el cupo ya tiene docente.
    """
    habilitados = await habilitaciones_service.docentes_habilitados(db, materia_id)
    if docente_id not in habilitados:
        raise DocenteNoHabilitadoError(docente_id, materia_id)
    if not await habilitaciones_service.docente_activo(db, docente_id):
        raise DocenteInactivoError(docente_id, materia_id)

    try:
        return await registro_asignaciones.asignar(
            db, docente_id, materia_id, grado_id, gestion_id, asignado_por
        )
    except ConflictoCupoError as exc:
        raise CupoOcupadoError(
            exc.materia_id, exc.grado_id, exc.gestion_id, docente_id=exc.docente_id
        ) from exc


async def quitar_asignacion(db: AsyncSession, asignacion_id: int) -> None:
    """Quita una asignación; AsignacionNoEncontradaError si no existe."""
    await registro_asignaciones.desasignar(db, asignacion_id)
