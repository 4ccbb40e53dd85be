"""Modelo Grado (nivel escolar)."""
from sqlalchemy import BigInteger, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base, BigIntPK


class Grado(Base):
    """Nivel escolar: Kinder, Grade 1, Grade 2, etc. `orden` define la secuencia."""

    __tablename__ = "grados"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(always=True), primary_key=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    orden: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, server_default=text("0")
    )
