"""Esquemas para el registro de roles."""
from pydantic import BaseModel, Field, field_validator

from app.core.roles import normalizar_rol


class RolCreate(BaseModel):
    """Body para crear un rol personalizado."""

    nombre: str = Field(description="Nombre del rol; se guarda en minúsculas", min_length=1)
    descripcion: str | None = Field(default=None, description="Descripción opcional")

    @field_validator("nombre")
    @classmethod
    def nombre_normalizado(cls, v: str) -> str:
        return normalizar_rol(v)


class RolItem(BaseModel):
    id: int
    nombre: str
    descripcion: str | None = None


class RolListResponse(BaseModel):
    roles: list[RolItem]


class ModuloItem(BaseModel):
    id: int
    nombre: str


class ModuloListResponse(BaseModel):
    modulos: list[ModuloItem]
