"""Índice de habilitaciones docente-materia."""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.docente_materia import DocenteMateria
from app.models.user import ESTADO_ACTIVO, Usuario


async def docentes_habilitados(db: AsyncSession, materia_id: int, solo_activos: bool = False) -> set[int]:
    """IDs de los docentes habilitados para la materia (sin duplicados ni orden).

    Con `solo_activos` se descartan los usuarios dados de baja.
    """
    stmt = select(DocenteMateria.docente_id).where(DocenteMateria.materia_id == materia_id)
    if solo_activos:
        stmt = stmt.join(Usuario, Usuario.id == DocenteMateria.docente_id).where(
            Usuario.estado == ESTADO_ACTIVO
        )
    result = await db.execute(stmt)
    return set(result.scalars().all())


async def docente_activo(db: AsyncSession, docente_id: int) -> bool:
    estado = await db.scalar(select(Usuario.estado).where(Usuario.id == docente_id))
    return estado == ESTADO_ACTIVO


async def materias_de_docente(db: AsyncSession, docente_id: int) -> set[int]:
    """IDs de las materias para las que el docente está habilitado."""
    result = await db.execute(
        select(DocenteMateria.materia_id).where(DocenteMateria.docente_id == docente_id)
    )
    return set(result.scalars().all())


async def habilitar_docente(db: AsyncSession, docente_id: int, materia_id: int) -> bool:
    """Otorga la habilitación. Devuelve False si ya existía."""
    existente = await db.get(DocenteMateria, (docente_id, materia_id))
    if existente is not None:
        return False
    db.add(DocenteMateria(docente_id=docente_id, materia_id=materia_id))
    await db.flush()
    return True


async def revocar_habilitacion(db: AsyncSession, docente_id: int, materia_id: int) -> bool:
    """Revoca la habilitación. Las asignaciones ya hechas no se tocan.

    Devuelve False si no existía.
    """
    result = await db.execute(
        delete(DocenteMateria)
        .where(DocenteMateria.docente_id == docente_id, DocenteMateria.materia_id == materia_id)
        .execution_options(synchronize_session="fetch")
    )
    await db.flush()
    return result.rowcount > 0
