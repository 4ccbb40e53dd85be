"""
Configuración de pytest.

Cada test usa una base SQLite en memoria (aiosqlite + StaticPool) con el
esquema completo; la app recibe sesiones de ese mismo motor vía
dependency_overrides. AnyIO corre siempre sobre asyncio.
"""
import os
from datetime import date

# Antes de importar la app: evita crear el motor asyncpg de producción
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import httpx
import pytest
from httpx import ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models import DocenteMateria, GestionAcademica, Grado, Materia, Rol, Usuario


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def crear_usuario(db):
    """Crea un usuario con el rol indicado (creando el rol si hace falta) y lo confirma."""

    async def _crear(nombre: str, rol: str = "teacher", estado: str = "activo", password: str = "secreto123") -> Usuario:
        result = await db.execute(select(Rol).where(Rol.nombre == rol))
        registro = result.scalar_one_or_none()
        if registro is None:
            registro = Rol(nombre=rol)
            db.add(registro)
            await db.flush()
        usuario = Usuario(
            nombre=nombre,
            email=f"{nombre.lower().replace(' ', '.')}@escuela.edu",
            password_hash=hash_password(password),
            rol_id=registro.id,
            estado=estado,
        )
        db.add(usuario)
        await db.commit()
        return usuario

    return _crear


@pytest.fixture
def token_de():
    def _token(usuario: Usuario, rol: str = "admin") -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(usuario.id, rol)}"}

    return _token


@pytest.fixture
async def catalogo(db):
    """Materias Math/Science, grados G1/G2 y una gestión, confirmados en la base."""
    math = Materia(nombre="Math")
    science = Materia(nombre="Science")
    g1 = Grado(nombre="Grade 1", orden=1)
    g2 = Grado(nombre="Grade 2", orden=2)
    y1 = GestionAcademica(nombre="2026-2027", fecha_inicio=date(2026, 8, 1), fecha_fin=date(2027, 6, 30), activa=True)
    db.add_all([math, science, g1, g2, y1])
    await db.commit()
    return {"math": math.id, "science": science.id, "g1": g1.id, "g2": g2.id, "y1": y1.id}


@pytest.fixture
def habilitar(db):
    async def _habilitar(docente_id: int, materia_id: int) -> None:
        db.add(DocenteMateria(docente_id=docente_id, materia_id=materia_id))
        await db.commit()

    return _habilitar
