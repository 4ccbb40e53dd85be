"""Modelo Módulo (catálogo) y permisos por usuario sobre cada módulo."""
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Boolean, ForeignKey, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.user import Usuario


class Modulo(Base):
    """Pantalla o función del sistema cuyo acceso se controla (ej. Finance, Settings)."""

    __tablename__ = "modulos"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    orden: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, server_default=text("0")
    )


class UsuarioModulo(Base):
    """Permiso individual de un usuario sobre un módulo; tiene prioridad sobre la regla del rol.

    El módulo se guarda como clave de texto y no como FK al catálogo: una
    clave desconocida es válida.
    """

    __tablename__ = "usuario_modulo"

    usuario_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("usuarios.id", ondelete="CASCADE"), primary_key=True
    )
    modulo: Mapped[str] = mapped_column(Text, primary_key=True)
    puede_ver: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    puede_editar: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    usuario: Mapped["Usuario"] = relationship("Usuario", back_populates="overrides")
