"""Almacén de permisos: reglas por rol y permisos individuales por usuario.

Es el único que escribe en `permisos_rol_modulo` y `usuario_modulo`. No hay
caché: lo escrito se hace flush de inmediato y la siguiente lectura en la
misma sesión ya lo ve.
"""
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy import delete, func, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.roles import clave_modulo, clave_rol, normalizar_modulo, normalizar_rol
from app.models.modulo import UsuarioModulo
from app.models.permiso_rol import PermisoRolModulo


@dataclass(frozen=True)
class EntradaOverride:
    """Permiso individual de un usuario sobre un módulo."""

    modulo: str
    puede_ver: bool
    puede_editar: bool


_COLUMNAS_OVERRIDE = (UsuarioModulo.modulo, UsuarioModulo.puede_ver, UsuarioModulo.puede_editar)


def _insert_para(db: AsyncSession):
    """`insert` con soporte ON CONFLICT según el dialecto de la sesión."""
    if db.get_bind().dialect.name == "sqlite":
        return sqlite.insert
    return postgresql.insert


async def set_permiso_rol(db: AsyncSession, rol: str, modulo: str, habilitado: bool) -> None:
    """Crea o reemplaza la regla (rol, módulo). Idempotente; gana la última escritura."""
    dialect_insert = _insert_para(db)
    stmt = dialect_insert(PermisoRolModulo).values(
        rol=normalizar_rol(rol),
        modulo=normalizar_modulo(modulo),
        habilitado=habilitado,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["rol", "modulo"],
        set_={"habilitado": stmt.excluded.habilitado, "updated_at": func.now()},
    )
    await db.execute(stmt)
    await db.flush()


async def get_permisos_rol(db: AsyncSession, rol: str) -> dict[str, bool]:
    """Reglas del rol como {modulo: habilitado}. Un rol sin reglas devuelve {}."""
    result = await db.execute(
        select(PermisoRolModulo.modulo, PermisoRolModulo.habilitado)
        .where(PermisoRolModulo.rol == clave_rol(rol))
        .order_by(PermisoRolModulo.modulo)
    )
    return {modulo: habilitado for modulo, habilitado in result.all()}


async def get_regla_rol(db: AsyncSession, rol: str, modulo: str) -> bool | None:
    """Valor de la regla (rol, módulo) o None si no existe."""
    result = await db.execute(
        select(PermisoRolModulo.habilitado).where(
            PermisoRolModulo.rol == clave_rol(rol),
            PermisoRolModulo.modulo == clave_modulo(modulo),
        )
    )
    return result.scalar_one_or_none()


async def get_todos_permisos(db: AsyncSession) -> dict[str, dict[str, bool]]:
    """Matriz completa {rol: {modulo: habilitado}} para la pantalla de configuración."""
    result = await db.execute(
        select(PermisoRolModulo.rol, PermisoRolModulo.modulo, PermisoRolModulo.habilitado)
        .order_by(PermisoRolModulo.rol, PermisoRolModulo.modulo)
    )
    matriz: dict[str, dict[str, bool]] = {}
    for rol, modulo, habilitado in result.all():
        matriz.setdefault(rol, {})[modulo] = habilitado
    return matriz


async def set_overrides_usuario(
    db: AsyncSession,
    usuario_id: int,
    entradas: Iterable[EntradaOverride],
) -> None:
    """Reemplaza todos los permisos individuales del usuario.

    Borra todas las filas del usuario e inserta las recibidas dentro de la
    misma transacción; los módulos que no vengan en `entradas` quedan sin
    permiso individual. Una lista vacía limpia todo. Si una clave se repite,
    vale la última entrada.
    """
    por_modulo: dict[str, EntradaOverride] = {}
    for entrada in entradas:
        por_modulo[normalizar_modulo(entrada.modulo)] = entrada

    await db.execute(delete(UsuarioModulo).where(UsuarioModulo.usuario_id == usuario_id))
    if por_modulo:
        await db.execute(
            insert(UsuarioModulo),
            [
                {
                    "usuario_id": usuario_id,
                    "modulo": modulo,
                    "puede_ver": entrada.puede_ver,
                    "puede_editar": entrada.puede_editar,
                }
                for modulo, entrada in por_modulo.items()
            ],
        )
    await db.flush()


async def get_overrides_usuario(db: AsyncSession, usuario_id: int) -> list[EntradaOverride]:
    """Permisos individuales del usuario ordenados por módulo."""
    result = await db.execute(
        select(*_COLUMNAS_OVERRIDE)
        .where(UsuarioModulo.usuario_id == usuario_id)
        .order_by(UsuarioModulo.modulo)
    )
    return [EntradaOverride(*fila) for fila in result.all()]


async def get_override(db: AsyncSession, usuario_id: int, modulo: str) -> EntradaOverride | None:
    """Permiso individual del usuario para un módulo, si existe."""
    result = await db.execute(
        select(*_COLUMNAS_OVERRIDE).where(
            UsuarioModulo.usuario_id == usuario_id,
            UsuarioModulo.modulo == clave_modulo(modulo),
        )
    )
    fila = result.one_or_none()
    return EntradaOverride(*fila) if fila is not None else None
