"""Modelo Materia."""
from typing import TYPE_CHECKING

from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.docente_materia import DocenteMateria


class Materia(Base):
    """Materia: ej. Math, Science, Filipino."""

    __tablename__ = "materias"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    habilitaciones: Mapped[list["DocenteMateria"]] = relationship(
        "DocenteMateria", back_populates="materia", cascade="all, delete-orphan"
    )
