"""Esquemas para asignaciones de docentes a materias por grado y gestión."""
from datetime import datetime

from pydantic import BaseModel, Field


class AsignacionCreate(BaseModel):
    """Body para asignar un docente a un cupo (materia, grado, gestión)."""

    docente_id: int = Field(description="ID del docente (usuario)")
    materia_id: int = Field(description="ID de la materia")
    grado_id: int = Field(description="ID del grado")
    gestion_id: int = Field(description="ID de la gestión académica")


class AsignacionCreada(BaseModel):
    id: int


class AsignacionItem(BaseModel):
    """Fila de asignación con nombres para mostrar."""

    id: int
    docente_id: int
    nombre_docente: str | None = None
    materia_id: int
    nombre_materia: str | None = None
    grado_id: int
    nombre_grado: str | None = None
    gestion_id: int
    asignado_por: int | None = None
    created_at: datetime | None = None


class AsignacionListResponse(BaseModel):
    asignaciones: list[AsignacionItem]


class DocenteItem(BaseModel):
    """Docente disponible o habilitado."""

    id: int
    nombre: str
    email: str


class DocentesResponse(BaseModel):
    docentes: list[DocenteItem]
