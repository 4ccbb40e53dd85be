"""Endpoints de autenticación y dependencias para proteger rutas por módulo."""
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.database import get_db
from app.core.roles import clave_rol
from app.core.security import create_access_token, decode_access_token, verify_password
from app.models import Usuario
from app.schemas.auth import LoginRequest, TokenResponse
from app.services import acceso_service
from app.services.acceso_service import Principal

router = APIRouter(prefix="/auth", tags=["auth"])
security = HTTPBearer(auto_error=False)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Iniciar sesión",
    response_description="Token JWT para usar en el header Authorization",
    responses={
        200: {"description": "Login correcto, se devuelve el access_token"},
        401: {"description": "Correo o contraseña incorrectos"},
        403: {"description": "Usuario inactivo"},
    },
)
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Autenticación con **correo** y **contraseña**.
    Devuelve un **access_token** (JWT) para el header `Authorization: Bearer <access_token>`.
    """
    result = await db.execute(
        select(Usuario).options(selectinload(Usuario.rol)).where(Usuario.email == data.email)
    )
    usuario = result.scalar_one_or_none()
    if not usuario or not verify_password(data.password, usuario.password_hash or ""):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Correo o contraseña incorrectos",
        )
    if usuario.estado != "activo":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuario inactivo. Contacte al administrador.",
        )
    rol = clave_rol(usuario.rol.nombre)
    token = create_access_token(usuario.id, rol, extra={"email": usuario.email})
    return TokenResponse(access_token=token, rol=rol)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Usuario:
    """Dependencia: exige un JWT válido y devuelve el usuario actual con su rol cargado."""
    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token de autenticación no proporcionado o inválido",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido o expirado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    result = await db.execute(
        select(Usuario).options(selectinload(Usuario.rol)).where(Usuario.id == int(payload["sub"]))
    )
    usuario = result.scalar_one_or_none()
    if not usuario:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuario no encontrado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if usuario.estado != "activo":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuario inactivo. Contacte al administrador.",
        )
    return usuario


def principal_de(usuario: Usuario) -> Principal:
    """Principal de acceso (rol normalizado + id) del usuario autenticado."""
    return Principal(rol=usuario.rol.nombre, usuario_id=usuario.id)


def require_module(modulo: str, editar: bool = False) -> Callable:
    """Dependencia que exige que el usuario actual pueda ver (o editar) el módulo indicado."""

    async def _check(
        current_user: Usuario = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
    ) -> Usuario:
        principal = principal_de(current_user)
        if editar:
            permitido = await acceso_service.puede_editar(db, principal, modulo)
        else:
            permitido = await acceso_service.puede_ver(db, principal, modulo)
        if not permitido:
            accion = "editar" if editar else "acceder a"
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"No tiene permiso para {accion} el módulo '{modulo}'",
            )
        return current_user

    return _check
