"""Modelo DocenteMateria: habilitación de un docente para dictar una materia."""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.user import Usuario
    from app.models.subject import Materia


class DocenteMateria(Base):
    """Habilitación sin vigencia: vale para cualquier gestión hasta que se revoque."""

    __tablename__ = "docente_materia"
    __table_args__ = (Index("ix_docente_materia_materia_id", "materia_id"),)

    docente_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("usuarios.id", ondelete="CASCADE"), primary_key=True
    )
    materia_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("materias.id", ondelete="CASCADE"), primary_key=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    docente: Mapped["Usuario"] = relationship("Usuario", back_populates="habilitaciones")
    materia: Mapped["Materia"] = relationship("Materia", back_populates="habilitaciones")
