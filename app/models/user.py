"""Modelo Usuario (principal de las verificaciones de acceso)."""
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.role import Rol
    from app.models.modulo import UsuarioModulo
    from app.models.docente_materia import DocenteMateria

ESTADO_ACTIVO = "activo"


class Usuario(Base):
    """Usuario del sistema: administradores, docentes, personal de finanzas, etc."""

    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    rol_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("roles.id"), nullable=False)
    estado: Mapped[str] = mapped_column(
        Text, nullable=False, default=ESTADO_ACTIVO, server_default=text("'activo'")
    )
    telefono: Mapped[str | None] = mapped_column(Text, nullable=True)

    rol: Mapped["Rol"] = relationship("Rol", back_populates="usuarios")
    overrides: Mapped[list["UsuarioModulo"]] = relationship(
        "UsuarioModulo", back_populates="usuario", cascade="all, delete-orphan"
    )
    habilitaciones: Mapped[list["DocenteMateria"]] = relationship(
        "DocenteMateria", back_populates="docente", cascade="all, delete-orphan"
    )
