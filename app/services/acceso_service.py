"""Evaluación de acceso a módulos para un principal (rol + usuario).

Orden de precedencia, igual para ver y para editar:

1. Permiso individual del usuario para el módulo, si existe.
2. Regla del rol para el módulo.
3. Sin regla: el módulo está habilitado (permitir por defecto). Un módulo
   nuevo es visible para todos los roles hasta que un administrador lo
   deshabilite explícitamente.

No lanza errores por datos ausentes ni por claves inválidas: un rol o módulo
vacío no tiene reglas guardadas y cae en el permiso por defecto. Solo propaga
los errores de la base de datos.
"""
from dataclasses import dataclass, field
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.roles import clave_modulo, clave_rol
from app.services import permisos_store

PERMITIR_POR_DEFECTO = True


@dataclass(frozen=True)
class Principal:
    """Quién pide el acceso: rol normalizado y, opcionalmente, el usuario."""

    rol: str
    usuario_id: int | None = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rol", clave_rol(self.rol))


async def _evaluar(db: AsyncSession, principal: Principal, modulo: str, editar: bool) -> bool:
    if principal.usuario_id is not None:
        override = await permisos_store.get_override(db, principal.usuario_id, modulo)
        if override is not None:
            return override.puede_editar if editar else override.puede_ver

    habilitado = await permisos_store.get_regla_rol(db, principal.rol, modulo)
    if habilitado is None:
        return PERMITIR_POR_DEFECTO
    return habilitado


async def puede_ver(db: AsyncSession, principal: Principal, modulo: str) -> bool:
    """¿El módulo está habilitado (visible) para el principal?"""
    return await _evaluar(db, principal, modulo, editar=False)


async def puede_editar(db: AsyncSession, principal: Principal, modulo: str) -> bool:
    """¿El principal puede modificar datos del módulo?"""
    return await _evaluar(db, principal, modulo, editar=True)


async def modulos_visibles(db: AsyncSession, principal: Principal, modulos: Iterable[str]) -> list[str]:
    """Filtra el catálogo de módulos dejando los que el principal puede ver, en el mismo orden."""
    reglas_rol = await permisos_store.get_permisos_rol(db, principal.rol)
    overrides = {}
    if principal.usuario_id is not None:
        overrides = {
            o.modulo: o.puede_ver
            for o in await permisos_store.get_overrides_usuario(db, principal.usuario_id)
        }

    visibles = []
    for modulo in modulos:
        clave = clave_modulo(modulo)
        if clave in overrides:
            permitido = overrides[clave]
        else:
            permitido = reglas_rol.get(clave, PERMITIR_POR_DEFECTO)
        if permitido:
            visibles.append(modulo)
    return visibles
