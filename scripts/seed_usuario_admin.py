"""Crea (o actualiza la contraseña de) el usuario administrador inicial."""
import asyncio
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select
from app.core.database import AsyncSessionLocal
from app.core.security import hash_password
from app.models import Rol, Usuario

ROL_NOMBRE = "admin"
USUARIO_NOMBRE = "Administrador"
USUARIO_EMAIL = os.getenv("ADMIN_EMAIL", "admin@escuela.edu")
USUARIO_PASSWORD_PLAIN = os.getenv("ADMIN_PASSWORD", "admin1234")


async def seed_usuario_admin():
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Rol).where(Rol.nombre == ROL_NOMBRE))
        rol = result.scalar_one_or_none()
        if not rol:
            rol = Rol(nombre=ROL_NOMBRE, descripcion="Acceso completo")
            session.add(rol)
            await session.flush()
            print(f"  + Rol creado: {ROL_NOMBRE} (id={rol.id})")

        result = await session.execute(select(Usuario).where(Usuario.email == USUARIO_EMAIL))
        usuario = result.scalar_one_or_none()
        if not usuario:
            usuario = Usuario(
                nombre=USUARIO_NOMBRE,
                email=USUARIO_EMAIL,
                password_hash=hash_password(USUARIO_PASSWORD_PLAIN),
                rol_id=rol.id,
            )
            session.add(usuario)
            await session.flush()
            print(f"  + Administrador creado: id={usuario.id}, email={usuario.email}")
        else:
            usuario.password_hash = hash_password(USUARIO_PASSWORD_PLAIN)
            print(f"  + Contraseña actualizada para: {usuario.email}")
        await session.commit()
    print(f"  Login: {USUARIO_EMAIL}")


if __name__ == "__main__":
    asyncio.run(seed_usuario_admin())
