"""Modelo PermisoRolModulo: regla habilitado/deshabilitado por (rol, módulo)."""
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Identity, Index, Text, UniqueConstraint, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base, BigIntPK


class PermisoRolModulo(Base):
    """Regla de acceso de un rol a un módulo. La última escritura reemplaza a la anterior."""

    __tablename__ = "permisos_rol_modulo"
    __table_args__ = (
        UniqueConstraint("rol", "modulo", name="uq_permisos_rol_modulo_rol_modulo"),
        Index("ix_permisos_rol_modulo_rol", "rol"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    rol: Mapped[str] = mapped_column(Text, nullable=False)
    modulo: Mapped[str] = mapped_column(Text, nullable=False)
    habilitado: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    # Sin historial de cambios; se conserva para una futura auditoría
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
