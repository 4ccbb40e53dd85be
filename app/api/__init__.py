"""Routers de la API."""
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints import (
    asignaciones,
    auth,
    gestiones,
    grados,
    materias,
    modulos,
    permisos,
    roles,
)
from app.api.endpoints.auth import get_current_user, principal_de
from app.core.database import get_db
from app.models import Modulo, Usuario
from app.schemas.auth import MeResponse
from app.services import acceso_service

router = APIRouter()
router.include_router(auth.router)
router.include_router(permisos.router)
router.include_router(modulos.router)
router.include_router(roles.router)
router.include_router(materias.router)
router.include_router(grados.router)
router.include_router(gestiones.router)
router.include_router(asignaciones.router)


@router.get(
    "/me",
    response_model=MeResponse,
    tags=["api"],
    summary="Usuario actual (protegido)",
    responses={401: {"description": "Token no enviado, inválido o expirado"}},
)
async def get_me(
    current_user: Usuario = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Devuelve el usuario actual y los módulos del catálogo que puede ver,
    aplicando sus permisos individuales, las reglas de su rol y el permiso por defecto.
    """
    principal = principal_de(current_user)
    r = await db.execute(select(Modulo.nombre).order_by(Modulo.orden, Modulo.id))
    modulos = await acceso_service.modulos_visibles(db, principal, r.scalars().all())
    return MeResponse(
        id=current_user.id,
        nombre=current_user.nombre,
        email=current_user.email,
        rol=principal.rol,
        estado=current_user.estado,
        modulos=modulos,
    )


@router.get(
    "/",
    tags=["api"],
    summary="Raíz de la API v1",
)
async def api_root():
    """Información básica de la API y enlace a la documentación Swagger."""
    return {"message": "Gestión Escolar API v1", "docs": "/docs", "redoc": "/redoc"}
