"""Modelo AsignacionDocente: un docente ocupa el cupo (materia, grado, gestión)."""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Identity, Index, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.user import Usuario
    from app.models.subject import Materia
    from app.models.grado import Grado
    from app.models.gestion_academica import GestionAcademica


class AsignacionDocente(Base):
    """Asignación vigente. A lo sumo una por cupo: la restricción única es la que decide."""

    __tablename__ = "asignaciones_docentes"
    __table_args__ = (
        UniqueConstraint(
            "materia_id", "grado_id", "gestion_id", name="uq_asignaciones_docentes_cupo"
        ),
        Index("ix_asignaciones_docentes_docente_gestion", "docente_id", "gestion_id"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    docente_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False
    )
    materia_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("materias.id", ondelete="CASCADE"), nullable=False
    )
    grado_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("grados.id", ondelete="CASCADE"), nullable=False
    )
    gestion_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("gestiones_academicas.id", ondelete="CASCADE"), nullable=False
    )
    asignado_por: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("usuarios.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    docente: Mapped["Usuario"] = relationship("Usuario", foreign_keys=[docente_id])
    materia: Mapped["Materia"] = relationship("Materia")
    grado: Mapped["Grado"] = relationship("Grado")
    gestion: Mapped["GestionAcademica"] = relationship("GestionAcademica")
