"""Esquemas para gestiones académicas y grados."""
from datetime import date

from pydantic import BaseModel, Field, model_validator


class GestionAcademicaCreate(BaseModel):
    """Request para crear una gestión académica."""
    nombre: str = Field(description="Nombre de la gestión (ej. 2026-2027)", min_length=1)
    fecha_inicio: date = Field(description="Fecha de inicio del período")
    fecha_fin: date = Field(description="Fecha de fin del período")

    @model_validator(mode="after")
    def fechas_ordenadas(self) -> "GestionAcademicaCreate":
        if self.fecha_fin < self.fecha_inicio:
            raise ValueError("fecha_fin no puede ser anterior a fecha_inicio")
        return self


class GestionAcademicaItem(BaseModel):
    """Fila de la lista de gestiones."""
    id: int
    nombre: str
    fecha_inicio: date
    fecha_fin: date
    activa: bool


class GestionAcademicaListResponse(BaseModel):
    """Lista de gestiones académicas."""
    gestiones: list[GestionAcademicaItem]


class GradoItem(BaseModel):
    id: int
    nombre: str
    orden: int


class GradoListResponse(BaseModel):
    grados: list[GradoItem]
