"""Modelo Rol: registro de roles (incluye roles personalizados)."""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Identity, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.user import Usuario


class Rol(Base):
    """Rol del usuario: admin, teacher, principal o cualquier rol personalizado.

    Solo sirve para listar y asignar roles; la evaluación de permisos trabaja
    con el nombre normalizado y no exige que el rol exista aquí.
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    descripcion: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    usuarios: Mapped[list["Usuario"]] = relationship("Usuario", back_populates="rol")
