"""Endpoints de permisos: reglas por rol, permisos individuales y evaluación de acceso."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import get_current_user, principal_de, require_module
from app.core.config import settings
from app.core.database import get_db
from app.core.roles import normalizar_modulo, normalizar_rol
from app.models import Usuario
from app.schemas.permisos import (
    EvaluacionAcceso,
    MatrizPermisosResponse,
    OverrideItem,
    OverridesUsuario,
    OverridesUsuarioResponse,
    PermisoRolUpdate,
    PermisosRolResponse,
)
from app.services import acceso_service, permisos_store
from app.services.permisos_store import EntradaOverride

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/permisos", tags=["permisos"])

MODULO = settings.modulo_gestion_permisos


def _rol_valido(rol: str) -> str:
    try:
        return normalizar_rol(rol)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


def _modulo_valido(modulo: str) -> str:
    try:
        return normalizar_modulo(modulo)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


async def _usuario_existente(db: AsyncSession, usuario_id: int) -> Usuario:
    usuario = await db.get(Usuario, usuario_id)
    if not usuario:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado")
    return usuario


@router.get(
    "/roles",
    response_model=MatrizPermisosResponse,
    summary="Matriz de permisos por rol",
)
async def listar_matriz(
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(MODULO)),
):
    return MatrizPermisosResponse(roles=await permisos_store.get_todos_permisos(db))


@router.get(
    "/roles/{rol}",
    response_model=PermisosRolResponse,
    summary="Reglas de un rol",
    description="Módulos con regla explícita para el rol. Un módulo sin regla se considera habilitado.",
)
async def obtener_permisos_rol(
    rol: str,
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(MODULO)),
):
    rol = _rol_valido(rol)
    return PermisosRolResponse(rol=rol, permisos=await permisos_store.get_permisos_rol(db, rol))


@router.put(
    "/roles/{rol}/{modulo}",
    response_model=PermisosRolResponse,
    summary="Habilitar o deshabilitar un módulo para un rol",
)
async def actualizar_permiso_rol(
    rol: str,
    modulo: str,
    body: PermisoRolUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(MODULO, editar=True)),
):
    """Crea o reemplaza la regla (rol, módulo). No falla con roles o módulos desconocidos."""
    rol = _rol_valido(rol)
    modulo = _modulo_valido(modulo)
    await permisos_store.set_permiso_rol(db, rol, modulo, body.habilitado)
    logger.info(
        "Usuario %s fijó %s=%s para el rol %s", current_user.id, modulo, body.habilitado, rol
    )
    return PermisosRolResponse(rol=rol, permisos=await permisos_store.get_permisos_rol(db, rol))


@router.get(
    "/usuarios/{usuario_id}",
    response_model=OverridesUsuarioResponse,
    summary="Permisos individuales de un usuario",
)
async def obtener_overrides(
    usuario_id: int,
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(MODULO)),
):
    await _usuario_existente(db, usuario_id)
    entradas = await permisos_store.get_overrides_usuario(db, usuario_id)
    return OverridesUsuarioResponse(
        usuario_id=usuario_id,
        entradas=[
            OverrideItem(modulo=e.modulo, puede_ver=e.puede_ver, puede_editar=e.puede_editar)
            for e in entradas
        ],
    )


@router.put(
    "/usuarios/{usuario_id}",
    response_model=OverridesUsuarioResponse,
    summary="Reemplazar los permisos individuales de un usuario",
    description="Reemplaza el conjunto completo. Los módulos no enviados vuelven a regirse por la regla del rol.",
)
async def reemplazar_overrides(
    usuario_id: int,
    body: OverridesUsuario,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(MODULO, editar=True)),
):
    await _usuario_existente(db, usuario_id)
    await permisos_store.set_overrides_usuario(
        db,
        usuario_id,
        [EntradaOverride(e.modulo, e.puede_ver, e.puede_editar) for e in body.entradas],
    )
    logger.info(
        "Usuario %s reemplazó permisos individuales de %s (%d entradas)",
        current_user.id,
        usuario_id,
        len(body.entradas),
    )
    entradas = await permisos_store.get_overrides_usuario(db, usuario_id)
    return OverridesUsuarioResponse(
        usuario_id=usuario_id,
        entradas=[
            OverrideItem(modulo=e.modulo, puede_ver=e.puede_ver, puede_editar=e.puede_editar)
            for e in entradas
        ],
    )


@router.get(
    "/evaluar",
    response_model=EvaluacionAcceso,
    summary="Evaluar acceso del usuario actual a un módulo",
)
async def evaluar_acceso(
    modulo: str = Query(min_length=1, description="Clave del módulo"),
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(get_current_user),
):
    modulo = _modulo_valido(modulo)
    principal = principal_de(current_user)
    return EvaluacionAcceso(
        modulo=modulo,
        puede_ver=await acceso_service.puede_ver(db, principal, modulo),
        puede_editar=await acceso_service.puede_editar(db, principal, modulo),
    )
