"""Endpoints del registro de roles (roles predefinidos y personalizados)."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.auth import require_module
from app.core.config import settings
from app.core.database import get_db
from app.models import Rol, Usuario
from app.schemas.rol import RolCreate, RolItem, RolListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("", response_model=RolListResponse, summary="Listar roles")
async def listar_roles(
    db: AsyncSession = Depends(get_db),
    _: Usuario = Depends(require_module(settings.modulo_gestion_permisos)),
):
    result = await db.execute(select(Rol).order_by(Rol.nombre))
    return RolListResponse(
        roles=[RolItem(id=r.id, nombre=r.nombre, descripcion=r.descripcion) for r in result.scalars().all()]
    )


@router.post(
    "",
    response_model=RolItem,
    status_code=status.HTTP_201_CREATED,
    summary="Crear rol personalizado",
)
async def crear_rol(
    body: RolCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Usuario = Depends(require_module(settings.modulo_gestion_permisos, editar=True)),
):
    existente = await db.execute(select(Rol).where(Rol.nombre == body.nombre))
    if existente.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ya existe un rol con nombre '{body.nombre}'",
        )
    rol = Rol(nombre=body.nombre, descripcion=body.descripcion)
    db.add(rol)
    await db.flush()
    logger.info("Usuario %s creó el rol %s", current_user.id, rol.nombre)
    return RolItem(id=rol.id, nombre=rol.nombre, descripcion=rol.descripcion)
